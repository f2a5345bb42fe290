"""Unit tests for altitude readout and presentation cues."""

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from lander.dynamics.state import Thruster
from lander.readout import (
    SPRITE_FRAME_COUNT,
    AltitudeLabel,
    DisplaySink,
    RecordingSink,
    publish_altitude,
    sprite_frame,
)


class TestAltitudeSinks:
    """Test display sinks."""

    def test_label_formats_value(self):
        label = AltitudeLabel()
        publish_altitude(label, 1991.0625)
        assert label.text == "Altitude: 1991.1"

    def test_label_precision_and_prefix(self):
        label = AltitudeLabel(prefix="ALT ", precision=3)
        publish_altitude(label, -12.34567)
        assert label.text == "ALT -12.346"

    def test_label_empty_before_first_publish(self):
        assert AltitudeLabel().text == ""

    def test_recording_sink(self):
        sink = RecordingSink()
        assert sink.latest is None

        for value in [2000.0, 1999.5, 1998.0]:
            publish_altitude(sink, value)

        assert sink.values == [2000.0, 1999.5, 1998.0]
        assert sink.latest == 1998.0

    def test_sinks_satisfy_protocol(self):
        assert isinstance(AltitudeLabel(), DisplaySink)
        assert isinstance(RecordingSink(), DisplaySink)

    def test_rejects_non_sink(self):
        with pytest.raises(BeartypeCallHintParamViolation):
            publish_altitude(object(), 1.0)


class TestSpriteFrame:
    """Test sprite-sheet frame selection."""

    @pytest.mark.parametrize(
        "thruster, boosting, expected",
        [
            (Thruster.NONE, False, 0),
            (Thruster.NONE, True, 1),
            (Thruster.RIGHT, False, 2),
            (Thruster.RIGHT, True, 3),
            (Thruster.LEFT, False, 4),
            (Thruster.LEFT, True, 5),
        ],
    )
    def test_frames(self, thruster, boosting, expected):
        frame = sprite_frame(thruster, boosting)
        assert frame == expected
        assert 0 <= frame < SPRITE_FRAME_COUNT
