# src/shared/error_codes.py
# Central mapping that aligns with the Error Contract.
# Keep keys stable; clients match on them.
ERROR_CODES = {
    # ─── Validation & Requests ──────────────────────────────────────────────
    "validation_error": {
        "http": 400,
        "message": "Validation failed for one or more fields."
    },
    "invalid_request": {
        "http": 422,
        "message": "Invalid request payload."
    },

    # ─── Families & Students ───────────────────────────────────────────────
    "not_found": {
        "http": 404,
        "message": "Resource not found."
    },
    "family_not_found": {
        "http": 404,
        "message": "Family not found."
    },
    "family_slot_not_found": {
        "http": 404,
        "message": "Parent pair not found in family."
    },
    "student_not_found": {
        "http": 404,
        "message": "Student not found."
    },

    # ─── Conflicts ─────────────────────────────────────────────────────────
    "conflict": {
        "http": 409,
        "message": "Conflict with existing resource."
    },
    "student_already_in_family": {
        "http": 409,
        "message": "Student is already a member of the target family."
    },

    # ─── Internal ──────────────────────────────────────────────────────────
    "internal_error": {
        "http": 500,
        "message": "An unexpected error occurred. Please try again later."
    },
}
