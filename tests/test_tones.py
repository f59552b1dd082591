import math

import pytest

import vocalprism.tones


def test_tone_request_defaults () -> None:

	tone = vocalprism.tones.ToneRequest(165.0)

	assert tone.duration == 0.5
	assert tone.start == 0.0
	assert tone.volume == 0.3
	assert tone.pan == 0.0
	assert tone.end == 0.5


@pytest.mark.parametrize("kwargs", [
	{"frequency": 0.0},
	{"frequency": 165.0, "duration": 0.0},
	{"frequency": 165.0, "start": -1.0},
	{"frequency": 165.0, "volume": 1.5},
	{"frequency": 165.0, "pan": -2.0},
])
def test_tone_request_validation (kwargs) -> None:

	with pytest.raises(ValueError):
		vocalprism.tones.ToneRequest(**kwargs)


def test_single_tone () -> None:

	(tone,) = vocalprism.tones.tone(220.0, duration=1.0, pan=0.5)

	assert tone.frequency == 220.0
	assert tone.duration == 1.0
	assert tone.pan == 0.5


def test_chord_shares_volume () -> None:

	"""Each chord note gets volume / sqrt(n) so the sum does not clip."""

	tones = vocalprism.tones.chord([165.0, 220.0, 247.5], volume=0.3)

	assert [t.frequency for t in tones] == [165.0, 220.0, 247.5]
	assert all(t.start == 0.0 for t in tones)
	assert all(t.volume == pytest.approx(0.3 / math.sqrt(3)) for t in tones)
	assert vocalprism.tones.chord([]) == ()


def test_sequence_timing () -> None:

	"""At 120 BPM each note gets half a second and sounds for 90% of it."""

	tones = vocalprism.tones.sequence([165.0, 220.0, 247.5], tempo=120)

	assert [t.start for t in tones] == [0.0, 0.5, 1.0]
	assert all(t.duration == pytest.approx(0.45) for t in tones)


def test_sequence_with_explicit_lengths () -> None:

	tones = vocalprism.tones.sequence([(165.0, 1.0), 220.0], tempo=60)

	assert [t.start for t in tones] == [0.0, 1.0]
	assert tones[0].duration == pytest.approx(0.9)
	assert tones[1].duration == pytest.approx(0.9)


def test_sequence_rejects_bad_tempo () -> None:

	with pytest.raises(ValueError):
		vocalprism.tones.sequence([165.0], tempo=0)


def test_interval () -> None:

	together = vocalprism.tones.interval(200.0, 1.5)
	assert [t.frequency for t in together] == [200.0, 300.0]
	assert together[1].start == 0.0

	apart = vocalprism.tones.interval(200.0, 1.5, sequential=True, delay=0.3)
	assert [t.start for t in apart] == [0.0, 0.3]
	assert apart[1].frequency == 300.0


def test_harmonic_series () -> None:

	stacked = vocalprism.tones.harmonic_series(100.0, harmonics=4, sequential=False)

	assert [t.frequency for t in stacked] == [100.0, 200.0, 300.0, 400.0]
	assert [t.volume for t in stacked] == pytest.approx([0.3, 0.15, 0.1, 0.075])

	arpeggio = vocalprism.tones.harmonic_series(100.0, harmonics=3)
	assert [t.start for t in arpeggio] == pytest.approx([0.0, 0.3, 0.6])


def test_drone_presets () -> None:

	tanpura = vocalprism.tones.drone(165.0)

	assert [t.frequency for t in tanpura] == pytest.approx([165.0, 247.5, 330.0])
	assert all(t.duration == 8.0 for t in tanpura)

	assert len(vocalprism.tones.drone(165.0, "ison")) == 1

	with pytest.raises(ValueError):
		vocalprism.tones.drone(165.0, "bagpipe")


@pytest.mark.parametrize("mode, expected", [
	("centered", (162.0, 168.0)),
	("above", (165.0, 171.0)),
	("below", (159.0, 165.0)),
])
def test_binaural_modes (mode, expected) -> None:

	left, right = vocalprism.tones.binaural(165.0, 6.0, mode=mode)

	assert (left.frequency, right.frequency) == expected
	assert left.pan == -1.0
	assert right.pan == 1.0
	assert right.frequency - left.frequency == pytest.approx(6.0)


def test_binaural_rejects_unknown_mode () -> None:

	with pytest.raises(ValueError):
		vocalprism.tones.binaural(165.0, 6.0, mode="sideways")


def test_scale_run (scale_165) -> None:

	run = vocalprism.tones.scale_run(scale_165, tempo=120)

	assert len(run) == 8
	assert [t.frequency for t in run] == [d.hz for d in scale_165]
	assert run[-1].start == 3.5
