import os, logging, time
from typing import Iterable, List, Optional

from tlsdebug.common.config import load_settings
from tlsdebug.common.utils import sha256_hex
from tlsdebug.registry.resolve import Registries
from tlsdebug.render.messages import render

logger = logging.getLogger(__name__)

def render_lines(objects: Iterable, registries: Optional[Registries] = None) -> List[str]:
    return [render(o, registries) for o in objects]

def append_lines(lines, filename=None, directory=None):
    directory = directory or load_settings().transcript_dir
    filename = filename or f"transcript_{int(time.time())}.log"
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, filename)
    with open(path, "a", encoding="utf-8") as f:
        for l in lines:
            f.write(l.rstrip("\n") + "\n")
    logger.info("wrote transcript %s", path)
    return path

def sha256_of_file(path):
    with open(path, "rb") as f:
        return sha256_hex(f.read())

def read_lines(path):
    with open(path, "r", encoding="utf-8") as f: return [l.rstrip("\n") for l in f.readlines()]

def compare(path, expected_lines) -> bool:
    """True when the transcript at ``path`` holds exactly ``expected_lines``."""
    return read_lines(path) == [l.rstrip("\n") for l in expected_lines]
