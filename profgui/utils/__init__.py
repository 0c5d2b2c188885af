__all__ = [
    "verify_password",
    "get_password_hash",
    "generate_temporary_password",
    "create_session_token",
    "decode_session_token",
    "normalize_phone",
]


def __getattr__(name):
    if name in {
        "verify_password",
        "get_password_hash",
        "generate_temporary_password",
        "create_session_token",
        "decode_session_token",
    }:
        from . import security as _security
        return getattr(_security, name)
    if name == "normalize_phone":
        from . import phone as _phone
        return _phone.normalize_phone
    raise AttributeError(f"module 'profgui.utils' has no attribute '{name}'")
