"""Unit tests for main module."""

import pytest
from unittest.mock import patch

import main


@pytest.mark.unit
def test_main_exports_server_handler():
    from server import server

    assert main.server_app is server.handler


@pytest.mark.unit
def test_main_runs_uvicorn():
    with patch.object(main.uvicorn, "run") as mock_run:
        main.main()

    mock_run.assert_called_once_with(main.server_app, host="0.0.0.0", port=8000)
