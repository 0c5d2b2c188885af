from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from profgui.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_MESSAGE = "Données invalides"

# User-facing message for the first failing rule of each field.
FIELD_MESSAGES = {
    "first_name": "Le prénom doit contenir au moins 2 caractères",
    "last_name": "Le nom doit contenir au moins 2 caractères",
    "phone": "Numéro de téléphone invalide",
    "email": "Email invalide",
    "password": "Le mot de passe doit contenir au moins 6 caractères",
    "new_password": "Le mot de passe doit contenir au moins 6 caractères",
    "city": "Veuillez sélectionner une ville",
    "level": "Veuillez sélectionner un niveau",
    "levels": "Veuillez sélectionner au moins un niveau",
    "subjects": "Veuillez sélectionner au moins une matière",
    "course_type": "Type de cours invalide",
    "address": "Adresse invalide",
    "children": "Veuillez ajouter au moins un enfant",
    "diploma": "Veuillez indiquer votre diplôme",
    "availability": "Veuillez indiquer vos disponibilités",
}


def first_error_message(
    exc: PydanticValidationError, overrides: Optional[Mapping[str, str]] = None
) -> str:
    error = exc.errors()[0]
    field = next((part for part in reversed(error["loc"]) if isinstance(part, str)), None)
    error_type = error["type"]

    if overrides and field in overrides:
        return overrides[field]
    # Custom validators carry their own message, except email syntax errors.
    if error_type == "value_error" and field != "email":
        ctx_error = error.get("ctx", {}).get("error")
        if ctx_error:
            return str(ctx_error)
    return FIELD_MESSAGES.get(field, DEFAULT_MESSAGE)


def parse_payload(model: Type[ModelT], data: Any) -> ModelT:
    """Validate a raw request body, raising ValidationError on the first bad field."""
    if isinstance(data, model):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError(DEFAULT_MESSAGE)
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError(
            first_error_message(exc, getattr(model, "field_messages", None))
        ) from exc
