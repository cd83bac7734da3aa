"""
TASK-001: Project structure tests

Acceptance Criteria:
- pyproject.toml declares the runtime dependencies
- src/soulscape package layout exists
- FastAPI app loads and /health responds
"""

import importlib
import os
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).parent.parent


class TestProjectStructure:
    """Project layout tests"""

    def test_pyproject_toml_exists(self):
        """pyproject.toml must exist"""
        assert (PROJECT_ROOT / "pyproject.toml").exists(), "pyproject.toml is missing"

    def test_pyproject_toml_has_required_dependencies(self):
        """pyproject.toml must declare the runtime dependencies"""
        import tomllib

        with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
            config = tomllib.load(f)

        dependencies = config.get("project", {}).get("dependencies", [])
        dep_names = [
            dep.split("==")[0].split(">=")[0].split(">")[0].split("<")[0].lower()
            for dep in dependencies
        ]

        required_deps = ["fastapi", "uvicorn", "pydantic", "pyyaml", "click", "vadersentiment"]

        for dep in required_deps:
            assert dep in dep_names, f"Missing required dependency {dep}"

    def test_package_modules_exist(self):
        """Package init and entry points must exist"""
        package_dir = PROJECT_ROOT / "src" / "soulscape"

        assert (package_dir / "__init__.py").exists()
        assert (package_dir / "main.py").exists()
        assert (package_dir / "cli.py").exists()
        assert (package_dir / "api" / "main.py").exists()

    def test_fastapi_app_can_be_created(self):
        """The app factory builds the FastAPI application"""
        from soulscape.api.main import create_app

        app = create_app()

        assert app is not None
        assert app.title == "Soulscape API"

    def test_health_endpoint(self):
        """/health must respond with healthy"""
        from soulscape.api.main import create_app

        client = TestClient(create_app())
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestServerEntryPoint:
    """Lazy app construction"""

    def test_import_does_not_read_environment(self):
        """Importing the API module succeeds even with a broken environment"""
        import soulscape.api.main

        with patch.dict(os.environ, {"PORT": "eighty"}):
            module = importlib.reload(soulscape.api.main)

        assert callable(module.create_app)
        assert not hasattr(module, "app")

    def test_run_uses_app_factory(self):
        """uvicorn builds the app through create_app"""
        from soulscape import main

        with patch.dict(os.environ, {"PORT": "8123", "SOULSCAPE_HOST": "0.0.0.0", "SOULSCAPE_LOG_LEVEL": "ERROR"}):
            with patch.object(main.uvicorn, "run") as mock_run:
                main.run()

        mock_run.assert_called_once_with(
            "soulscape.api.main:create_app",
            factory=True,
            host="0.0.0.0",
            port=8123,
            log_level="error",
        )
