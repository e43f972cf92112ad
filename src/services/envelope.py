ENVELOPE_KEYS = ("data", "result")


def normalize_list(body):
    """
    Returns the list of records carried by a listing response.

    The list is looked up under `data`, then `result`, then the body itself.
    Anything that does not resolve to a list is an empty page.
    """
    resolved = body
    if isinstance(body, dict):
        for key in ENVELOPE_KEYS:
            if body.get(key) is not None:
                resolved = body[key]
                break

    if not isinstance(resolved, list):
        return []
    return resolved
