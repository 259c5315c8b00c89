import os
import sys
from pathlib import Path
from dataclasses import dataclass

APP_DIR_NAME = "MomentTimer"

# Creates the directory (and parents) if missing, returns it unchanged.
def ensure_directory(path: Path):
    path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the per-user data folder. MT_DATA_DIR always wins, then APPDATA on Windows, then the XDG data home.
def resolve_data_dir():
    override = os.getenv("MT_DATA_DIR")
    if override:
        return Path(override)

    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if not appdata:
            raise RuntimeError("Missing APPDATA environment variable, cannot determine data directories.")
        return Path(appdata) / APP_DIR_NAME

    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    home = os.getenv("HOME")
    if not home:
        raise RuntimeError("Missing HOME environment variable, cannot determine data directories.")
    return Path(home) / ".local" / "share" / APP_DIR_NAME

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    root: Path
    data: Path
    logs: Path

    @staticmethod
    def build():
        # Folder for the source tree itself, nothing user-specific
        if getattr(sys, "frozen", False):
            root = Path(sys.executable).resolve().parent
        else:
            root = Path(__file__).resolve().parents[2]

        # Folder for all user-specific stuff (settings, logs)
        data = ensure_directory(resolve_data_dir())
        logs = ensure_directory(data / "logs")

        return ProjectPaths(
            root = root,
            data = data,
            logs = logs,
        )
PATHS = ProjectPaths.build()
