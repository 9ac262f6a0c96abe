import json

import interviewer.interviewer as iv_mod
from config import LlmRoute
from screening import Message


def _route(name="test") -> LlmRoute:
    return LlmRoute(
        name=name,
        base_url="http://example.com",
        endpoint="/llm",
        model="test-model",
        timeout_s=1.0,
    )


def _gateway() -> iv_mod.LlmSessionGateway:
    return iv_mod.LlmSessionGateway(
        opening_route=_route("opening"),
        reply_route=_route("reply"),
        report_route=_route("report"),
    )


def test_persona_includes_job_details(job_config) -> None:
    persona = iv_mod._build_persona(job_config)
    assert persona.startswith("You are TalentScout")
    assert "Role: Backend Engineer" in persona
    assert "Level: Senior" in persona
    assert "Topics to probe: System design, Python, SQL" in persona
    assert "Design and operate Python services." in persona


def test_persona_without_topics(job_config) -> None:
    config = job_config.model_copy(update={"topics": []})
    assert "(none specified" in iv_mod._build_persona(config)


def test_begin_session_invokes_gateway(monkeypatch, job_config) -> None:
    captured: dict[str, object] = {}

    def fake_call(task: str, schema, *, cfg):
        captured.update(task=task, schema=schema, cfg=cfg)
        return iv_mod.OpeningMessage(text="Hello, let's begin.")

    monkeypatch.setattr(iv_mod, "call", fake_call)
    assert _gateway().begin_session(job_config) == "Hello, let's begin."
    assert captured["schema"] is iv_mod.OpeningMessage
    assert captured["cfg"].name == "opening"
    assert "Start the interview now." in captured["task"]


def test_reply_maps_roles(monkeypatch, job_config) -> None:
    captured: dict[str, object] = {}

    def fake_chat(messages, schema, *, cfg):
        captured.update(messages=messages, schema=schema, cfg=cfg)
        return iv_mod.InterviewerTurn(text="Tell me more.")

    monkeypatch.setattr(iv_mod, "chat", fake_chat)
    history = [Message(role="model", text="First question?"), Message(role="user", text="My answer.")]

    assert _gateway().reply(history, job_config) == "Tell me more."
    messages = captured["messages"]
    assert messages[0]["role"] == "system"
    assert messages[1:] == [
        {"role": "assistant", "content": "First question?"},
        {"role": "user", "content": "My answer."},
    ]
    assert captured["cfg"].name == "reply"


def test_generate_report_sends_transcript(monkeypatch, job_config, sample_report) -> None:
    captured: dict[str, object] = {}

    def fake_call(task: str, schema, *, cfg):
        captured.update(task=task, schema=schema, cfg=cfg)
        return sample_report

    monkeypatch.setattr(iv_mod, "call", fake_call)
    result = _gateway().generate_report("USER: Hi\nMODEL: Hello", job_config)

    assert result is sample_report
    assert captured["schema"] is iv_mod.FinalReport
    assert "USER: Hi" in captured["task"]
    assert '"Strong Hire", "Hire", "Weak Hire", "No Hire"' in captured["task"]
    assert captured["cfg"].name == "report"


def test_load_gateway_reads_registry(tmp_path) -> None:
    route = _route("shared").model_dump()
    config_path = tmp_path / "app_config.json"
    config_path.write_text(
        json.dumps(
            {
                "llm_routes": {"shared": route, "slow": {**route, "name": "slow", "timeout_s": 90.0}},
                "registry": {
                    iv_mod.BEGIN_SESSION_KEY: "shared",
                    iv_mod.REPLY_KEY: "shared",
                    iv_mod.REPORT_KEY: "slow",
                },
            }
        ),
        encoding="utf-8",
    )

    gateway = iv_mod.load_gateway(config_path)

    assert gateway.opening_route.name == "shared"
    assert gateway.reply_route.name == "shared"
    assert gateway.report_route.timeout_s == 90.0
