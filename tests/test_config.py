# tests/test_config.py
from feishu_notify.adapters.feishu_notifier import FEISHU_WEBHOOK_BASE_URL
from feishu_notify.config import (
    action_input_name,
    get_input,
    load_settings,
    plain_env_name,
)


# --- 이름 변환 ---------------------------------------------------------------

def test_action_input_name():
    assert action_input_name("bot_token") == "INPUT_BOT_TOKEN"
    assert action_input_name("post-message") == "INPUT_POST_MESSAGE"


def test_plain_env_name_keeps_hyphen():
    assert plain_env_name("msg_type") == "MSG_TYPE"
    assert plain_env_name("msg-type") == "MSG-TYPE"


# --- get_input() -------------------------------------------------------------

def test_action_input_wins_over_plain_env():
    env = {"INPUT_BOT_TOKEN": "from-input", "BOT_TOKEN": "from-env"}

    assert get_input("bot_token", env) == "from-input"


def test_falls_back_to_plain_env():
    assert get_input("bot_token", {"BOT_TOKEN": "from-env"}) == "from-env"


def test_empty_action_input_falls_through():
    """비어 있는 INPUT_* 는 없는 것으로 취급"""
    env = {"INPUT_BOT_TOKEN": "", "BOT_TOKEN": "from-env"}

    assert get_input("bot_token", env) == "from-env"


def test_missing_returns_empty_string():
    assert get_input("bot_token", {}) == ""


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("INPUT_USER_MAPS", "a:1")

    assert get_input("user_maps") == "a:1"


# --- load_settings() ---------------------------------------------------------

def test_load_settings_collects_all_keys():
    env = {
        "INPUT_BOT_TOKEN": "T",
        "POST_MESSAGE": "Build failed",
        "INPUT_MSG_TYPE": "markdown",
        "USER_MAPS": "a:1",
        "INPUT_ASSIGNEES": '[{"login": "a"}]',
    }

    settings = load_settings(env)

    assert settings.bot_token == "T"
    assert settings.post_message == "Build failed"
    assert settings.message_file == ""
    assert settings.msg_type == "markdown"
    assert settings.has_mention_data is True
    assert settings.webhook_base_url == FEISHU_WEBHOOK_BASE_URL


def test_load_settings_base_url_override():
    settings = load_settings({"WEBHOOK_BASE_URL": "https://open.larksuite.com/open-apis/bot/v2/hook"})

    assert settings.webhook_base_url == "https://open.larksuite.com/open-apis/bot/v2/hook"


def test_mention_data_requires_both_values():
    assert load_settings({"USER_MAPS": "a:1"}).has_mention_data is False
    assert load_settings({"ASSIGNEES": "[]"}).has_mention_data is False
