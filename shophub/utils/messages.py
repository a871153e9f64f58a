"""Flash helpers."""

from flask import flash


def flash_errors(form, category='warning'):
    """Flash the first validation error of each invalid field."""
    for field_errors in form.errors.values():
        if field_errors:
            flash(field_errors[0], category)
