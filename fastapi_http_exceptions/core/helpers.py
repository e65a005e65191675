"""
Message formatting helpers shared by exceptions and responses.
"""


def format_forbidden_message(resource: str, reason: str | None = None) -> str:
    """Build the message for a denied resource.

    Args:
        resource: Name of the resource access was denied to.
        reason: Optional explanation appended after a colon.

    Returns:
        ``Access denied to {resource}`` or ``Access denied to {resource}: {reason}``.
    """
    message = f"Access denied to {resource}"
    if reason:
        message += f": {reason}"
    return message


def format_not_found_message(resource: str, reason: str | None = None) -> str:
    """Build the message for a missing resource.

    Args:
        resource: Name of the resource that was not found.
        reason: Optional explanation appended after a colon.

    Returns:
        ``{resource} not found`` or ``{resource} not found: {reason}``.
    """
    message = f"{resource} not found"
    if reason:
        message += f": {reason}"
    return message


def create_error_body(message: str) -> dict[str, str]:
    """Wrap a message in the canonical error body."""
    return {"error": message}
