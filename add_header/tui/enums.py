from enum import Enum

from add_header.models import FileStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


FILE_STATUS_STYLE = {
    FileStatus.EDITED: UIStyle.GREEN.value,
    FileStatus.WOULD_EDIT: UIStyle.YELLOW.value,
    FileStatus.PRESENT: UIStyle.DIM.value,
    FileStatus.SKIPPED_RULE: UIStyle.DIM.value,
    FileStatus.IGNORED: UIStyle.MAGENTA.value,
    FileStatus.FILTERED: UIStyle.MAGENTA.value,
    FileStatus.MISSING: UIStyle.CYAN.value,
}
