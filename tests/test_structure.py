"""
Structure lint tests
Verify that the package layout follows the component conventions.
"""

import json
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE = PROJECT_ROOT / "epochclock"

COMPONENT_FILES = ("__init__.py", "_impl.py", "component.py", "models.py")


class TestProjectStructure:
    def test_core_directories_exist(self) -> None:
        assert (PACKAGE / "domain").is_dir()
        assert (PACKAGE / "components").is_dir()
        assert (PACKAGE / "rules").is_dir()

    def test_shell_directories_exist(self) -> None:
        assert (PACKAGE / "app_shell").is_dir()
        assert (PACKAGE / "api" / "routes").is_dir()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_components_follow_layout(self) -> None:
        for name in ("config", "epoch"):
            component = PACKAGE / "components" / name
            for filename in COMPONENT_FILES:
                assert (component / filename).is_file(), f"{name}/{filename} missing"

    def test_sample_config_is_valid_json(self) -> None:
        with open(PROJECT_ROOT / "epochclock.json") as f:
            document = json.load(f)
        assert document["protocol"] == "epochclock"
