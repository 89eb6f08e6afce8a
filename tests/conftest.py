from __future__ import annotations

from pathlib import Path

import pytest

from mdpage.config import load_config


HEADER = "<!doctype html>\n<html>\n<head><link rel=\"stylesheet\" href=\"codehilite.css\"></head>\n<body>\n"
FOOTER = "</body>\n</html>\n"
ARTICLE = """# Comparing Two Languages

## Variables

Assignment looks alike.

```python
x = 1
```

## Summary

| Feature | Left | Right |
| ------- | ---- | ----- |
| Typing  | dynamic | static |
"""


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    (tmp_path / "header.html").write_text(HEADER, encoding="utf-8")
    (tmp_path / "footer.html").write_text(FOOTER, encoding="utf-8")
    (tmp_path / "readme.md").write_text(ARTICLE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def site_config(site_dir: Path):
    return load_config(None, base_dir=site_dir)
