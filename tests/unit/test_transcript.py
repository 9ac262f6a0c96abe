import pytest

from screening import Message, ensure_chronological, serialize_transcript


def test_serialize_two_turns():
    messages = [Message(role="user", text="Hi"), Message(role="model", text="Hello")]
    assert serialize_transcript(messages) == "USER: Hi\nMODEL: Hello"


def test_serialize_preserves_order_and_inner_newlines():
    messages = [
        Message(role="model", text="Question one?"),
        Message(role="user", text="Line a\nline b"),
        Message(role="model", text="Thanks."),
    ]
    assert serialize_transcript(messages) == "MODEL: Question one?\nUSER: Line a\nline b\nMODEL: Thanks."


def test_serialize_empty_conversation():
    assert serialize_transcript([]) == ""


def test_ensure_chronological_accepts_equal_timestamps():
    ensure_chronological(
        [
            Message(role="model", text="a", timestamp=5),
            Message(role="user", text="b", timestamp=5),
            Message(role="model", text="c", timestamp=9),
        ]
    )


def test_ensure_chronological_rejects_backwards_timestamps():
    with pytest.raises(ValueError, match="message 1"):
        ensure_chronological(
            [
                Message(role="model", text="a", timestamp=10),
                Message(role="user", text="b", timestamp=3),
            ]
        )
