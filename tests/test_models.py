from dataclasses import FrozenInstanceError

import pytest

from srt_parser import SRTParseError, Subtitle, Timestamp


class TestTimestamp:
    """Test the timestamp value type"""

    @pytest.mark.parametrize("timestamp,expected", [
        (Timestamp(0, 0, 0, 0), "00:00:00,000"),
        (Timestamp(0, 1, 1, 111), "00:01:01,111"),
        (Timestamp(1, 2, 3, 4), "01:02:03,004"),
        (Timestamp(59, 59, 59, 999), "59:59:59,999"),
    ])
    def test_canonical_form(self, timestamp, expected):
        assert str(timestamp) == expected

    def test_total_milliseconds(self):
        assert Timestamp(1, 2, 3, 4).total_milliseconds == 3723004

    def test_value_equality(self):
        assert Timestamp(0, 1, 2, 3) == Timestamp(0, 1, 2, 3)
        assert Timestamp(0, 1, 2, 3) != Timestamp(0, 1, 2, 4)
        assert len({Timestamp(0, 1, 2, 3), Timestamp(0, 1, 2, 3)}) == 1

    def test_immutable(self):
        timestamp = Timestamp(0, 0, 1, 0)
        with pytest.raises(FrozenInstanceError):
            timestamp.s = 2


class TestSubtitle:
    """Test the subtitle record"""

    @pytest.fixture
    def subtitle(self):
        return Subtitle(2, Timestamp(0, 3, 3, 300), Timestamp(0, 4, 4, 400),
                        "Caption 2 Line 1\nCaption 2 Line 2")

    def test_block_form(self, subtitle):
        assert str(subtitle) == (
            "2\n00:03:03,300 --> 00:04:04,400\nCaption 2 Line 1\nCaption 2 Line 2\n"
        )

    def test_block_form_without_caption(self):
        subtitle = Subtitle(1, Timestamp(0, 0, 1, 0), Timestamp(0, 0, 2, 0))

        assert subtitle.caption == ""
        assert str(subtitle) == "1\n00:00:01,000 --> 00:00:02,000\n"

    def test_timeline(self, subtitle):
        assert subtitle.timeline == "00:03:03,300 --> 00:04:04,400"

    def test_caption_is_editable(self, subtitle):
        subtitle.caption = "Edited"

        assert subtitle.caption == "Edited"

    @pytest.mark.parametrize("field,value", [
        ("index", 5),
        ("start", Timestamp(0, 0, 0, 0)),
        ("end", Timestamp(0, 0, 0, 0)),
    ])
    def test_other_fields_are_read_only(self, subtitle, field, value):
        with pytest.raises(FrozenInstanceError):
            setattr(subtitle, field, value)

    def test_field_equality(self, subtitle):
        copy = Subtitle(2, Timestamp(0, 3, 3, 300), Timestamp(0, 4, 4, 400),
                        "Caption 2 Line 1\nCaption 2 Line 2")

        assert copy == subtitle
        copy.caption = "Other"
        assert copy != subtitle

    @pytest.mark.parametrize("field", ["index", "start", "end"])
    def test_read_only_fields_cannot_be_deleted(self, subtitle, field):
        with pytest.raises(FrozenInstanceError):
            delattr(subtitle, field)

        assert subtitle.index == 2

    def test_hashable(self, subtitle):
        copy = Subtitle(2, Timestamp(0, 3, 3, 300), Timestamp(0, 4, 4, 400),
                        "Caption 2 Line 1\nCaption 2 Line 2")

        assert hash(copy) == hash(subtitle)
        assert len({subtitle, copy}) == 1


class TestSRTParseError:
    """Test the parse error value"""

    def test_fields(self):
        error = SRTParseError(3, "Failed to parse index as an integer")

        assert error.line_number == 3
        assert error.reason == "Failed to parse index as an integer"

    def test_message(self):
        error = SRTParseError(2, "Failed to parse start and end timestamps")

        assert str(error) == "Failed to parse srt on line 2: Failed to parse start and end timestamps"

    def test_equality(self):
        assert SRTParseError(1, "x") == SRTParseError(1, "x")
        assert SRTParseError(1, "x") != SRTParseError(2, "x")
        assert SRTParseError(1, "x") != SRTParseError(1, "y")
