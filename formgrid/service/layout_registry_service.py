from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from formgrid.domain.errors import UnknownLayoutError
from formgrid.domain.ports.Layout_registry import Layout_registry
from formgrid.domain.schemas.form_layout import FormLayout
from formgrid.lib.logger import get_logger


PACKAGED_LAYOUTS = Path(__file__).resolve().parent.parent / "layouts"


class LayoutRegistryService(Layout_registry):
    """Load form layouts from JSON files.

    The packaged `layouts/` directory is read first, then any extra
    directories (e.g. LAYOUTS_DIR); a later file with the same layout name
    replaces the earlier one.
    """

    def __init__(self, extra_dirs: Optional[Iterable[Path]] = None, *, include_packaged: bool = True) -> None:
        self.logger = get_logger("layouts")
        self._layouts: Dict[str, FormLayout] = {}
        dirs: List[Path] = [PACKAGED_LAYOUTS] if include_packaged else []
        dirs.extend(Path(d) for d in (extra_dirs or []))
        for d in dirs:
            self._load_dir(d)

    def register(self, layout: FormLayout) -> None:
        if layout.name in self._layouts:
            self.logger.info("layout %s overridden", layout.name)
        self._layouts[layout.name] = layout

    def get(self, name: str) -> FormLayout:
        try:
            return self._layouts[name]
        except KeyError:
            raise UnknownLayoutError(f"unknown layout {name!r}; known: {', '.join(self.names()) or '-'}") from None

    def names(self) -> List[str]:
        return sorted(self._layouts)

    def _load_dir(self, directory: Path) -> None:
        if not directory.is_dir():
            self.logger.warning("layouts directory not found: %s", directory)
            return
        for path in sorted(directory.glob("*.json")):
            try:
                layout = FormLayout.model_validate_json(path.read_text(encoding="utf-8"))
            except ValidationError as e:
                raise ValueError(f"invalid layout file {path}: {e}") from e
            self.register(layout)
            self.logger.debug("layout loaded: %s (%s)", layout.name, path.name)
