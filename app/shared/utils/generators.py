"""ID generators."""

import uuid


def generate_uuid() -> str:
    """Generate a random (version 4) UUID string for use as a primary key.

    Returns:
        A new UUID in canonical 36-character form.
    """
    return str(uuid.uuid4())
