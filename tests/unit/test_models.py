import pytest
from pydantic import ValidationError

from screening import EvaluationMetric, FinalReport, JobConfig, Message, radar_points


def test_job_config_trims_and_drops_blank_topics():
    config = JobConfig(role="  Data Engineer ", level="Mid", topics=["Spark", " ", " Airflow "])
    assert config.role == "Data Engineer"
    assert config.topics == ["Spark", "Airflow"]
    assert config.description == ""


@pytest.mark.parametrize("field", ["role", "level"])
def test_job_config_requires_role_and_level(field):
    values = {"role": "Engineer", "level": "Senior", field: "   "}
    with pytest.raises(ValidationError):
        JobConfig(**values)


def test_job_config_is_immutable():
    config = JobConfig(role="Engineer", level="Senior")
    with pytest.raises(ValidationError):
        config.role = "Manager"


def test_message_defaults():
    message = Message(role="user", text="Hello")
    assert message.id
    assert message.timestamp > 0
    with pytest.raises(ValidationError):
        Message(role="assistant", text="nope")


@pytest.mark.parametrize("score", [-1, 101, 250])
def test_metric_score_out_of_range_is_rejected(score):
    with pytest.raises(ValidationError):
        EvaluationMetric(category="SQL", score=score, feedback="x")


@pytest.mark.parametrize("score", [0, 100])
def test_metric_score_bounds_inclusive(score):
    assert EvaluationMetric(category="SQL", score=score, feedback="x").score == score


def test_report_rejects_unknown_recommendation(sample_report):
    data = sample_report.model_dump()
    data["hire_recommendation"] = "Maybe"
    with pytest.raises(ValidationError):
        FinalReport.model_validate(data)


def test_report_requires_metrics(sample_report):
    data = sample_report.model_dump()
    data["metrics"] = []
    with pytest.raises(ValidationError):
        FinalReport.model_validate(data)


def test_radar_points_follow_metrics(sample_report):
    points = radar_points(sample_report)
    assert [(p.subject, p.value, p.full_mark) for p in points] == [
        ("System design", 78, 100),
        ("Python", 85, 100),
        ("SQL", 52, 100),
    ]
