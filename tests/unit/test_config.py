import pytest

from common.config import DeploymentSettings

PUBLIC_KEY = "ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQTest demo@host"


def test_defaults_when_environment_is_empty():
    settings = DeploymentSettings.from_env({})
    assert settings.account is None
    assert settings.region == "eu-west-1"
    assert settings.env == "dev"
    assert settings.public_key_path is None
    assert settings.read_public_key() is None


def test_reads_values_from_environment():
    settings = DeploymentSettings.from_env(
        {
            "CDK_DEFAULT_ACCOUNT": "123456789012",
            "CDK_DEFAULT_REGION": "us-east-1",
            "DEPLOY_ENV": "prod",
            "EC2_PUBLIC_KEY_PATH": "/tmp/id.pub",
        }
    )
    assert settings.account == "123456789012"
    # availability zones are eu-west-1 literals, so the region never follows the CLI
    assert settings.region == "eu-west-1"
    assert settings.env == "prod"
    assert settings.public_key_path == "/tmp/id.pub"


def test_empty_values_are_treated_as_unset():
    settings = DeploymentSettings.from_env(
        {"CDK_DEFAULT_ACCOUNT": "", "EC2_PUBLIC_KEY_PATH": ""}
    )
    assert settings.account is None
    assert settings.public_key_path is None


def test_rejects_unknown_deploy_env():
    with pytest.raises(ValueError):
        DeploymentSettings.from_env({"DEPLOY_ENV": "qa"})


def test_read_public_key_strips_trailing_newline(tmp_path):
    key_file = tmp_path / "id_rsa.pub"
    key_file.write_text(PUBLIC_KEY + "\n")
    settings = DeploymentSettings(public_key_path=str(key_file))
    assert settings.read_public_key() == PUBLIC_KEY


def test_read_public_key_expands_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / "key.pub").write_text(PUBLIC_KEY)
    settings = DeploymentSettings(public_key_path="~/key.pub")
    assert settings.read_public_key() == PUBLIC_KEY


def test_missing_public_key_file_propagates(tmp_path):
    settings = DeploymentSettings(public_key_path=str(tmp_path / "missing.pub"))
    with pytest.raises(FileNotFoundError):
        settings.read_public_key()
