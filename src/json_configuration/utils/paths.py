"""Location strings used in drop diagnostics."""


def child_path(path: str, key: str, separator: str = ".") -> str:
    """Path of a member key below path, joined with the section separator."""
    return f"{path}{separator}{key}" if path else key


def index_path(path: str, index: int) -> str:
    """Path of an array element below path."""
    return f"{path}[{index}]"
