from __future__ import annotations

import pytest

from profgui import models
from profgui.exceptions import ConflictError, ValidationError
from profgui.services import directory_service, registration_service

from conftest import parent_payload, student_payload, teacher_payload


def test_register_student_creates_pending_user_and_profile(db_session):
    message = registration_service.register_student(db_session, student_payload())

    assert "attente de validation" in message
    user = db_session.query(models.User).one()
    assert user.role == "student"
    assert user.status == "pending"
    assert user.must_change_password is False
    assert user.email is None
    assert user.phone == "+224 621 11 22 33"
    assert user.phone_key == "621112233"
    assert user.password_hash != "secret1"

    student = db_session.query(models.Student).one()
    assert student.user_id == user.id
    assert student.subjects == ["Mathématiques", "Anglais"]
    assert student.course_type == "domicile"


def test_register_parent_creates_one_child_per_entry(db_session):
    registration_service.register_parent(db_session, parent_payload())

    parent = db_session.query(models.Parent).one()
    children = db_session.query(models.Child).filter(models.Child.parent_id == parent.id).all()
    assert sorted(c.first_name for c in children) == ["Aissatou", "Mamadou"]
    assert parent.user.role == "parent"
    assert parent.user.email == "ibrahima@example.com"


def test_register_teacher_stores_lists(db_session):
    message = registration_service.register_teacher(db_session, teacher_payload())

    assert "Votre profil" in message
    teacher = db_session.query(models.Teacher).one()
    assert teacher.subjects == ["Mathématiques", "Physique-Chimie"]
    assert teacher.levels == ["10ème année", "12ème année / Terminale"]
    assert teacher.bio == "Professeure passionnée"
    assert teacher.user.status == "pending"


def test_duplicate_normalized_phone_is_a_conflict(db_session):
    registration_service.register_student(db_session, student_payload(phone="+224 620 00 00 00"))

    with pytest.raises(ConflictError):
        registration_service.register_teacher(db_session, teacher_payload(phone="620000000"))

    assert db_session.query(models.User).count() == 1
    assert db_session.query(models.Teacher).count() == 0


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"first_name": "A"}, "Le prénom doit contenir au moins 2 caractères"),
        ({"last_name": ""}, "Le nom doit contenir au moins 2 caractères"),
        ({"phone": "62000"}, "Numéro de téléphone invalide"),
        ({"email": "not-an-email"}, "Email invalide"),
        ({"password": "12345"}, "Le mot de passe doit contenir au moins 6 caractères"),
        ({"subjects": []}, "Veuillez sélectionner au moins une matière"),
        ({"course_type": "par_pigeon"}, "Type de cours invalide"),
        ({"city": ""}, "Veuillez sélectionner une ville"),
    ],
)
def test_student_validation_reports_rule(db_session, overrides, message):
    with pytest.raises(ValidationError) as excinfo:
        registration_service.register_student(db_session, student_payload(**overrides))
    assert excinfo.value.message == message
    assert db_session.query(models.User).count() == 0


def test_validation_reports_first_violated_field(db_session):
    payload = student_payload(first_name="A", password="1", subjects=[])
    with pytest.raises(ValidationError) as excinfo:
        registration_service.register_student(db_session, payload)
    assert excinfo.value.message == "Le prénom doit contenir au moins 2 caractères"


def test_password_has_no_upper_length(db_session):
    registration_service.register_student(db_session, student_payload(password="x" * 80))
    assert db_session.query(models.User).count() == 1


def test_parent_requires_children_with_subjects(db_session):
    with pytest.raises(ValidationError) as excinfo:
        registration_service.register_parent(db_session, parent_payload(children=[]))
    assert excinfo.value.message == "Veuillez ajouter au moins un enfant"

    child = {"first_name": "Awa", "last_name": "Sow", "level": "2ème année", "subjects": []}
    with pytest.raises(ValidationError) as excinfo:
        registration_service.register_parent(db_session, parent_payload(children=[child]))
    assert excinfo.value.message == "Veuillez sélectionner au moins une matière"


def test_parent_address_minimum_length(db_session):
    with pytest.raises(ValidationError) as excinfo:
        registration_service.register_parent(db_session, parent_payload(address="Rue"))
    assert excinfo.value.message == "Adresse invalide"


def test_teacher_email_is_required(db_session):
    payload = teacher_payload()
    payload.pop("email")
    with pytest.raises(ValidationError) as excinfo:
        registration_service.register_teacher(db_session, payload)
    assert excinfo.value.message == "Email invalide"

    with pytest.raises(ValidationError):
        registration_service.register_teacher(db_session, teacher_payload(email=""))


def test_list_items_may_not_contain_commas(db_session):
    with pytest.raises(ValidationError) as excinfo:
        registration_service.register_teacher(
            db_session, teacher_payload(levels=["Licence 1, Licence 2"])
        )
    assert "virgule" in excinfo.value.message


def test_non_mapping_payload_is_rejected(db_session):
    with pytest.raises(ValidationError):
        registration_service.register_student(db_session, ["not", "a", "dict"])


def test_new_teacher_is_invisible_in_directory(db_session):
    registration_service.register_teacher(db_session, teacher_payload())
    assert directory_service.list_approved_teachers(db_session) == []
