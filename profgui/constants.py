# Catalogues and enumerations shared by models, schemas and routes.

ROLE_STUDENT = "student"
ROLE_PARENT = "parent"
ROLE_TEACHER = "teacher"
ROLE_ADMIN = "admin"

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"
REVIEW_DECISIONS = (STATUS_APPROVED, STATUS_REJECTED)

# domicile = at the student's home, en_ligne = online, les_deux = both
COURSE_TYPES = ("domicile", "en_ligne", "les_deux")

# Path segment used by the admin listing/deletion routes
PROFILE_TYPES = ("students", "parents", "teachers")

# Sentinel sent by the directory filters for "no filter"
FILTER_ALL = "all"

ADMIN_WHATSAPP = "+224629516388"

EDUCATION_LEVELS = (
    "1ère année",
    "2ème année",
    "3ème année",
    "4ème année",
    "5ème année",
    "6ème année",
    "7ème année",
    "8ème année",
    "9ème année",
    "10ème année",
    "11ème année",
    "12ème année / Terminale",
    "Licence 1 (L1)",
    "Licence 2 (L2)",
    "Licence 3 (L3)",
    "Master 1 (M1)",
    "Master 2 (M2)",
)

SUBJECTS = (
    "Mathématiques",
    "Français",
    "Anglais",
    "Physique-Chimie",
    "Sciences de la Vie et de la Terre",
    "Histoire-Géographie",
    "Philosophie",
    "Économie",
    "Informatique",
    "Arabe",
    "Éducation Civique",
    "Comptabilité",
    "Droit",
    "Gestion",
)

CITIES = (
    "Conakry",
    "Kindia",
    "Boké",
    "Kankan",
    "Labé",
    "Mamou",
    "Faranah",
    "N'Zérékoré",
    "Siguiri",
    "Kissidougou",
)
