from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from profgui import models
from profgui.constants import STATUS_APPROVED


# ---------------- STUDENTS ----------------

def get_student(db: Session, student_id: str) -> Optional[models.Student]:
    return db.query(models.Student).filter(models.Student.id == student_id).first()


def get_student_by_user_id(db: Session, user_id: str) -> Optional[models.Student]:
    return db.query(models.Student).filter(models.Student.user_id == user_id).first()


def get_all_students(db: Session) -> List[models.Student]:
    return db.query(models.Student).options(selectinload(models.Student.user)).all()


# ---------------- PARENTS ----------------

def get_parent(db: Session, parent_id: str) -> Optional[models.Parent]:
    return db.query(models.Parent).filter(models.Parent.id == parent_id).first()


def get_parent_by_user_id(db: Session, user_id: str) -> Optional[models.Parent]:
    return db.query(models.Parent).filter(models.Parent.user_id == user_id).first()


def get_all_parents(db: Session) -> List[models.Parent]:
    return (
        db.query(models.Parent)
        .options(selectinload(models.Parent.user), selectinload(models.Parent.children))
        .all()
    )


def get_children_by_parent_id(db: Session, parent_id: str) -> List[models.Child]:
    return db.query(models.Child).filter(models.Child.parent_id == parent_id).all()


def delete_children_by_parent_id(db: Session, parent_id: str) -> int:
    return db.query(models.Child).filter(
        models.Child.parent_id == parent_id
    ).delete(synchronize_session=False)


# ---------------- TEACHERS ----------------

def get_teacher(db: Session, teacher_id: str) -> Optional[models.Teacher]:
    return db.query(models.Teacher).filter(models.Teacher.id == teacher_id).first()


def get_teacher_by_user_id(db: Session, user_id: str) -> Optional[models.Teacher]:
    return db.query(models.Teacher).filter(models.Teacher.user_id == user_id).first()


def get_all_teachers(db: Session) -> List[models.Teacher]:
    return db.query(models.Teacher).options(selectinload(models.Teacher.user)).all()


def get_approved_teachers(db: Session, city: Optional[str] = None) -> List[models.Teacher]:
    query = (
        db.query(models.Teacher)
        .join(models.User, models.Teacher.user_id == models.User.id)
        .filter(models.User.status == STATUS_APPROVED)
        .options(selectinload(models.Teacher.user))
    )
    if city:
        query = query.filter(models.Teacher.city == city)
    return query.all()


# ---------------- COUNTS ----------------

def count_profiles(db: Session, model) -> int:
    return db.query(model).count()
