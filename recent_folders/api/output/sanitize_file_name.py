"""Make a display name safe to use as a file name."""

from ...constants import FALLBACK_FOLDER_NAME, INVALID_FILE_NAME_CHARS, MAX_NAME_LENGTH

_TRANSLATION = str.maketrans({c: "_" for c in INVALID_FILE_NAME_CHARS})


def sanitize_file_name(name: str | None) -> str:
    """Replace invalid characters with underscores, trim, and cap the length.

    The invalid set is the Windows one (a superset of POSIX), so generated
    names are portable.

    Examples:
        >>> sanitize_file_name('a<b>:c')
        'a_b__c'
        >>> sanitize_file_name("   ")
        'Folder'
    """
    if name is None or not name.strip():
        return FALLBACK_FOLDER_NAME

    cleaned = name.translate(_TRANSLATION).strip()
    cleaned = cleaned[:MAX_NAME_LENGTH]
    return cleaned if cleaned.strip() else FALLBACK_FOLDER_NAME
