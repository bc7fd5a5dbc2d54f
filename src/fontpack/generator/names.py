"""Name derivation for generated font packages."""

import posixpath

SUFFIX = ".ttf"


def base_name(entry_name: str) -> str:
    """Map "dejavu-fonts-ttf-2.37/ttf/DejaVuSans.ttf" to "DejaVuSans.ttf"."""
    return posixpath.basename(entry_name)


def _strip_suffix(ttf_name: str, suffix: str) -> str:
    if suffix and ttf_name.endswith(suffix):
        return ttf_name[: -len(suffix)]
    return ttf_name


def font_name(ttf_name: str, suffix: str = SUFFIX) -> str:
    """Map "Go-Regular.ttf" to "Go Regular"."""
    return _strip_suffix(ttf_name, suffix).replace("-", " ")


def package_name(ttf_name: str, suffix: str = SUFFIX) -> str:
    """Map "Go-Regular.ttf" to "goregular"."""
    return _strip_suffix(ttf_name, suffix).replace("-", "").lower()
