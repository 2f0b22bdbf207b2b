"""Map a link target to the folder it represents."""

from pathlib import Path


def resolve_link_folder(target: str) -> tuple[Path | None, str]:
    """Return the folder a link target stands for.

    Directories stand for themselves; files stand for their parent directory
    when that parent exists. Anything else is dangling.

    Args:
        target: Target path read from a link file

    Returns:
        ``(folder, "")`` on success, ``(None, reason)`` when the link should be skipped
    """
    if not target or not target.strip():
        return None, "empty target"

    target_path = Path(target)
    if target_path.is_dir():
        return target_path.resolve(), ""

    if target_path.is_file():
        parent = target_path.parent
        if parent.is_dir():
            return parent.resolve(), ""
        return None, f"parent directory missing: {parent}"

    return None, f"target not found: {target}"
