"""Tests for SSH key commands."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from fornost_cli.exceptions import ApiError, NotFoundError
from fornost_cli.main import app
from fornost_cli.models import SSHKey

GET_CLIENT = "fornost_cli.commands.ssh.get_client"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def mock_client() -> Mock:
    """Create a mock resource client."""
    return Mock()


@pytest.fixture
def key_file(tmp_path: Path) -> Path:
    path = tmp_path / "id_ed25519.pub"
    path.write_text("\n  ssh-ed25519 AAAAC3Nza user@host  \n")
    return path


class TestSSHListCommand:
    """Test suite for ssh list command."""

    def test_list_table(self, runner: CliRunner, mock_client: Mock) -> None:
        mock_client.list_ssh_keys.return_value = [
            SSHKey(id=1, name="laptop", fingerprint="aa:bb:cc"),
            SSHKey(id=2, name="ci", fingerprint="dd:ee:ff"),
        ]

        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(app, ["ssh", "list"])

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert "FINGERPRINT" in result.output
        assert "laptop" in result.output
        assert "dd:ee:ff" in result.output

    def test_list_empty(self, runner: CliRunner, mock_client: Mock) -> None:
        mock_client.list_ssh_keys.return_value = []

        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(app, ["ssh", "list"])

        assert result.exit_code == 0
        assert "No SSH keys found." in result.output

    def test_list_json(self, runner: CliRunner, mock_client: Mock) -> None:
        mock_client.list_ssh_keys.return_value = [SSHKey(id=1, name="laptop")]

        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(app, ["ssh", "list", "-j"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"id": 1, "name": "laptop", "fingerprint": "", "public_key": ""}
        ]


class TestSSHAddCommand:
    """Test suite for ssh add command."""

    def test_add_strips_key_material(
        self, runner: CliRunner, mock_client: Mock, key_file: Path
    ) -> None:
        mock_client.add_ssh_key.return_value = SSHKey(id=42, name="k1", fingerprint="ab:cd")

        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(app, ["ssh", "add", "--name", "k1", "--key", str(key_file)])

        assert result.exit_code == 0, f"Command failed: {result.output}"
        mock_client.add_ssh_key.assert_called_once_with(
            "k1", "ssh-ed25519 AAAAC3Nza user@host"
        )
        assert 'Created SSH key "k1"' in result.output
        assert "ID: 42" in result.output
        assert "Fingerprint: ab:cd" in result.output

    def test_add_json(self, runner: CliRunner, mock_client: Mock, key_file: Path) -> None:
        mock_client.add_ssh_key.return_value = SSHKey(id=42, name="k1", fingerprint="ab:cd")

        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(
                app, ["ssh", "add", "-n", "k1", "-k", str(key_file), "--json"]
            )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["id"] == 42

    def test_add_requires_name_and_key(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["ssh", "add", "--name", "k1"])

        assert result.exit_code == 2

    def test_add_missing_file(self, runner: CliRunner, mock_client: Mock, tmp_path: Path) -> None:
        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(
                app, ["ssh", "add", "--name", "k1", "--key", str(tmp_path / "missing.pub")]
            )

        assert result.exit_code == 2
        assert "read key file" in result.output
        mock_client.add_ssh_key.assert_not_called()

    def test_add_empty_file(self, runner: CliRunner, mock_client: Mock, tmp_path: Path) -> None:
        empty = tmp_path / "empty.pub"
        empty.write_text("   \n")

        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(app, ["ssh", "add", "--name", "k1", "--key", str(empty)])

        assert result.exit_code == 2
        assert "key file is empty" in result.output
        mock_client.add_ssh_key.assert_not_called()

    def test_add_api_rejection(
        self, runner: CliRunner, mock_client: Mock, key_file: Path
    ) -> None:
        mock_client.add_ssh_key.side_effect = ApiError(
            409, code="uniqueness_error", message="key already exists"
        )

        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(app, ["ssh", "add", "--name", "k1", "--key", str(key_file)])

        assert result.exit_code == 1
        assert "key already exists" in result.output


class TestSSHDeleteCommand:
    """Test suite for ssh delete command."""

    def test_delete(self, runner: CliRunner, mock_client: Mock) -> None:
        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(app, ["ssh", "delete", "laptop"])

        assert result.exit_code == 0, f"Command failed: {result.output}"
        mock_client.delete_ssh_key.assert_called_once_with("laptop")
        assert 'Deleted SSH key "laptop"' in result.output

    def test_delete_not_found(self, runner: CliRunner, mock_client: Mock) -> None:
        mock_client.delete_ssh_key.side_effect = NotFoundError("ssh key", "laptop")

        with patch(GET_CLIENT, return_value=mock_client):
            result = runner.invoke(app, ["ssh", "delete", "laptop"])

        assert result.exit_code == 1
        assert "ssh key not found: laptop" in result.output
