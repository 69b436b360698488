"""Unit tests for the console entry point"""

from unittest.mock import patch

from intellicard import cli
from intellicard.config import settings


def test_main_serves_app_on_configured_address():
    with patch("intellicard.cli.uvicorn.run") as run:
        cli.main()

    run.assert_called_once_with("intellicard.api.main:app", host=settings.host, port=settings.port, log_config=None)
