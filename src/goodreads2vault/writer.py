"""Write rendered book notes to the vault filesystem."""

from pathlib import Path
from typing import Optional

from .exceptions import NoteWriteError, TemplateError
from .formatter import apply_file_name_template
from .models import BookNote


class Vault:
    """An Obsidian vault rooted at a directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def resolve(self, relative: str) -> Path:
        """Absolute path for a vault-relative path."""
        try:
            path = (self.root / relative.strip("/")).resolve()
        except (OSError, ValueError) as e:
            raise NoteWriteError(f"Invalid path {relative!r}: {e}") from e
        root = self.root.resolve()
        if path != root and root not in path.parents:
            raise NoteWriteError(f"{relative} is outside the vault")
        return path

    def create(self, relative: str, content: str) -> Path:
        """Create a new file; fails if it already exists or its folder is missing."""
        path = self.resolve(relative)
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError as e:
            raise NoteWriteError(f"File already exists: {relative}") from e
        except (OSError, ValueError) as e:
            raise NoteWriteError(f"Cannot create {relative}: {e}") from e
        return path

    def read(self, path: Path) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"Cannot read {path}: {e}") from e

    def first_linkpath_dest(self, linkpath: str) -> Optional[Path]:
        """Find the file a [[link]] to linkpath would open.

        An exact vault-relative path wins; otherwise the first markdown file
        (in sorted order) with the same file name, outside hidden folders
        such as .obsidian and .trash.
        """
        try:
            exact = self.resolve(linkpath)
        except NoteWriteError:
            return None
        if exact.is_file():
            return exact

        name = Path(linkpath).name
        for candidate in sorted(self.root.rglob("*.md")):
            hidden = any(
                part.startswith(".")
                for part in candidate.relative_to(self.root).parts
            )
            if candidate.name == name and not hidden and candidate.is_file():
                return candidate
        return None


def write_note(
    vault: Vault,
    note: BookNote,
    file_name_template: str,
    folder: str = "",
) -> Path:
    """Create <folder>/<file name>.md holding the note body.

    Returns the path of the created file.
    """
    file_name = apply_file_name_template(note, file_name_template)
    if not file_name.strip():
        raise NoteWriteError("The file name template produced an empty name")

    folder = folder.strip().strip("/")
    relative = f"{folder}/{file_name}.md" if folder else f"{file_name}.md"
    return vault.create(relative, note.content)
