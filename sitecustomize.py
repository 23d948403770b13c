# Puts the datefeed core and API source trees on sys.path when the
# interpreter starts from the repo root, so the launcher and scripts
# work without an editable install.
import os
import sys

ROOT = os.path.dirname(__file__)

SOURCE_ROOTS = [
    os.path.join(ROOT, "packages", "core", "src"),
    os.path.join(ROOT, "apps", "api", "src"),
]

for path in SOURCE_ROOTS:
    if os.path.isdir(path) and path not in sys.path:
        sys.path.insert(0, path)
