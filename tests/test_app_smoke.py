# -*- coding: utf-8 -*-
"""
Smoke tests to ensure application doesn't break after changes.
These tests verify basic functionality works.
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def test_imports():
    """Test that all main modules can be imported."""
    try:
        from models.event import ImageAsset, SubmissionRecord
        from services.wizard import StepNavigator, StepValidator, EVENT_STEPS
        from services.submission_service import SubmissionPipeline
        from services.api_client import EventApiClient
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_config_defaults():
    """Test that configuration loads."""
    from app.config import Config

    assert Config.API_BASE_URL
    assert Config.CREATE_EVENT_PATH.startswith("/")
    assert Config.ALLOWED_IMAGE_TYPES


def test_ui_components_import():
    """Test that UI components can be imported."""
    try:
        from ui.components.input_field import InputField
        from ui.wizards.event_form import EventFormWizard
        from ui.error_handler import ErrorHandler
        assert True
    except ImportError as e:
        pytest.fail(f"UI component import failed: {e}")


def test_services_lazy_exports():
    """Test that services can be imported."""
    import services

    assert services.SubmissionPipeline.__name__ == "SubmissionPipeline"
    assert services.EventApiClient.__name__ == "EventApiClient"


def test_entry_point_arguments():
    """Test command line parsing of the entry point."""
    from main import parse_args

    args = parse_args(["--user-id", "42", "--lang", "en"])
    assert args.user_id == "42"
    assert args.lang == "en"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
