from loguru import logger


def check_permission(role_id: int, permission: str, resource: str) -> bool:
    """Decide whether ``role_id`` holds ``permission`` on ``resource``.

    Placeholder that grants every request; replace with a lookup against the
    role/permission store when one exists.
    """
    logger.debug(
        "Permission check: role={} permission={} resource={}",
        role_id,
        permission,
        resource,
    )
    return True
