from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_names(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a name list file, one name per line by default."""

    def _write(names: list[str] | str, filename: str = "names.txt") -> Path:
        path = tmp_path / filename
        text = names if isinstance(names, str) else "".join(f"{n}\n" for n in names)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
