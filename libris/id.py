import uuid


def new_id() -> str:
    """Opaque identifier for a newly created record."""
    return uuid.uuid4().hex
