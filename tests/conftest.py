import pytest

from keyprune.common import io
from keyprune.common.logger import setup_logger


setup_logger(verbose=True)


SENSITIVE_KEYS = ["password", "token"]


def create_user(name: str = "John Doe", password: str = "secret", token: str = "abc123", **kwargs):
    return {
        "user": {
            "password": password,
            "profile": {
                "token": token,
                "name": name,
            },
            **kwargs
        }
    }


@pytest.fixture
def users():
    return [create_user(name=f"user-{i}", password=f"pass-{i}") for i in range(3)]


@pytest.fixture()
def input_file(tmp_path, users):
    return io.json_save(tmp_path.joinpath("users.json"), users)


@pytest.fixture()
def input_file_lines(tmp_path, users):
    return io.json_save(tmp_path.joinpath("users.jsonl"), users, lines=True)
