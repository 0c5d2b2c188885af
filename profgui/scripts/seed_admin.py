import argparse
import sys

from profgui import models  # noqa: F401
from profgui.config import settings
from profgui.database import Base, SessionLocal, engine
from profgui.services.auth_service import seed_admin


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the first ProfGui administrator.")
    parser.add_argument("--phone", default=settings.ADMIN_PHONE)
    parser.add_argument("--email", default=settings.ADMIN_EMAIL)
    parser.add_argument("--password", default=settings.ADMIN_PASSWORD)
    args = parser.parse_args(argv)

    if len(args.password) < 6:
        print("Admin bootstrap failed: password must be at least 6 characters.", file=sys.stderr)
        return 1

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        admin = seed_admin(db, phone=args.phone, email=args.email, password=args.password)
    except Exception as exc:
        db.rollback()
        print(f"Admin bootstrap failed: {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()

    if admin is None:
        print(f"An account already uses phone {args.phone}; nothing created.")
    else:
        print(f"Admin created successfully: {args.phone}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
