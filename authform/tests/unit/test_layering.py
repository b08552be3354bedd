from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[2]


@pytest.mark.parametrize(
    "layer,forbidden",
    [("usecases", "viewmodels"), ("domain", "usecases"), ("domain", "viewmodels")],
)
def test_inner_layers_do_not_import_outer_layers(layer, forbidden):
    offenders = [
        str(path.relative_to(PACKAGE_ROOT))
        for path in sorted((PACKAGE_ROOT / layer).glob("*.py"))
        if f"authform.{forbidden}" in path.read_text(encoding="utf-8")
        or f"..{forbidden}" in path.read_text(encoding="utf-8")
    ]
    assert offenders == []
