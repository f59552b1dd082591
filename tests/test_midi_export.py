import logging
import pathlib

import mido
import pytest

import vocalprism.midi_export
import vocalprism.tones


def _absolute (track: mido.MidiTrack, message_type: str) -> list:

	"""(absolute tick, message) pairs of one type."""

	tick = 0
	found = []

	for message in track:
		tick += message.time
		if message.type == message_type:
			found.append((tick, message))

	return found


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def test_split_frequency () -> None:

	assert vocalprism.midi_export.split_frequency(440.0) == (69, 0.0)

	note, cents = vocalprism.midi_export.split_frequency(165.0)
	assert note == 52
	assert cents == pytest.approx(1.95, abs=0.01)

	note, cents = vocalprism.midi_export.split_frequency(432.0, a4=432.0)
	assert note == 69
	assert cents == pytest.approx(0.0, abs=1e-9)


def test_split_frequency_out_of_range () -> None:

	with pytest.raises(ValueError):
		vocalprism.midi_export.split_frequency(20000.0)


def test_cents_to_pitchwheel () -> None:

	"""With a two-semitone bend range, 100 cents is half of full deflection."""

	assert vocalprism.midi_export.cents_to_pitchwheel(0.0) == 0
	assert vocalprism.midi_export.cents_to_pitchwheel(100.0) == 4096
	assert vocalprism.midi_export.cents_to_pitchwheel(-100.0) == -4096
	assert vocalprism.midi_export.cents_to_pitchwheel(100.0, bend_range=1.0) == 8191
	assert vocalprism.midi_export.cents_to_pitchwheel(-300.0) == -8192


def test_pan_and_velocity () -> None:

	assert vocalprism.midi_export.pan_to_cc(-1.0) == 0
	assert vocalprism.midi_export.pan_to_cc(0.0) == 64
	assert vocalprism.midi_export.pan_to_cc(1.0) == 127

	assert vocalprism.midi_export.volume_to_velocity(1.0) == 127
	assert vocalprism.midi_export.volume_to_velocity(0.0) == 1


def test_seconds_to_ticks () -> None:

	assert vocalprism.midi_export.seconds_to_ticks(0.5, tempo=120) == 480
	assert vocalprism.midi_export.seconds_to_ticks(1.0, tempo=60) == 480


# ---------------------------------------------------------------------------
# Channel allocation
# ---------------------------------------------------------------------------

def test_sequential_tones_share_a_channel () -> None:

	tones = vocalprism.tones.sequence([165.0, 220.0, 247.5])

	assert vocalprism.midi_export.assign_channels(tones) == [0, 0, 0]


def test_overlapping_tones_get_separate_channels () -> None:

	tones = vocalprism.tones.chord([165.0, 220.0, 247.5])

	assert vocalprism.midi_export.assign_channels(tones) == [0, 1, 2]


def test_sub_tick_tones_do_not_share_a_channel () -> None:

	"""A tone shorter than a tick still sounds for one tick, so a tone starting in that tick needs another channel."""

	tones = [
		vocalprism.tones.ToneRequest(165.0, duration=0.0001, start=0.0),
		vocalprism.tones.ToneRequest(220.0, duration=0.5, start=0.0004),
	]

	assert vocalprism.midi_export.tone_ticks(tones[0]) == (0, 1)
	assert vocalprism.midi_export.tone_ticks(tones[1]) == (0, 480)
	assert vocalprism.midi_export.assign_channels(tones) == [0, 1]

	mid = vocalprism.midi_export.render_midi(tones)
	channels = {msg.channel for msg in mid.tracks[0] if msg.type == "pitchwheel"}

	assert channels == {0, 1}


def test_drum_channel_is_skipped () -> None:

	tones = vocalprism.tones.chord([100.0 + i for i in range(10)])

	assert vocalprism.midi_export.assign_channels(tones) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 10]


def test_too_many_overlapping_tones () -> None:

	tones = vocalprism.tones.chord([100.0 + i for i in range(16)])

	with pytest.raises(ValueError):
		vocalprism.midi_export.assign_channels(tones)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def test_render_scale_run (scale_165) -> None:

	tones = vocalprism.tones.scale_run(scale_165, tempo=120)
	mid = vocalprism.midi_export.render_midi(tones, tempo=120)

	assert mid.type == 1
	assert mid.ticks_per_beat == 480

	track = mid.tracks[0]
	tempo = [m for m in track if m.type == "set_tempo"]
	assert tempo[0].tempo == mido.bpm2tempo(120)

	note_ons = _absolute(track, "note_on")
	assert [m.note for _, m in note_ons] == [vocalprism.midi_export.split_frequency(d.hz)[0] for d in scale_165]
	assert [tick for tick, _ in note_ons] == [i * 480 for i in range(8)]


def test_note_off_precedes_next_note_on () -> None:

	"""At a shared tick the old note is released before the next is bent and struck."""

	tones = (
		vocalprism.tones.ToneRequest(165.0, duration=0.5, start=0.0),
		vocalprism.tones.ToneRequest(247.5, duration=0.5, start=0.5),
	)
	track = vocalprism.midi_export.render_midi(tones, tempo=120).tracks[0]

	types = [m.type for m in track if not m.is_meta]
	assert types == ["control_change", "pitchwheel", "note_on", "note_off", "control_change", "pitchwheel", "note_on", "note_off"]


def test_pitchwheel_carries_cent_deviation () -> None:

	tones = vocalprism.tones.tone(247.5)
	track = vocalprism.midi_export.render_midi(tones).tracks[0]

	(_, bend), = _absolute(track, "pitchwheel")
	expected = vocalprism.midi_export.cents_to_pitchwheel(vocalprism.midi_export.split_frequency(247.5)[1])

	assert bend.pitch == expected
	assert bend.pitch > 0


def test_binaural_pair_is_panned () -> None:

	tones = vocalprism.tones.binaural(165.0, 6.0)
	track = vocalprism.midi_export.render_midi(tones).tracks[0]

	pans = [m for m in track if m.type == "control_change" and m.control == 10]
	assert sorted((m.channel, m.value) for m in pans) == [(0, 0), (1, 127)]


def test_render_rejects_bad_settings () -> None:

	tones = vocalprism.tones.tone(165.0)

	with pytest.raises(ValueError):
		vocalprism.midi_export.render_midi(tones, tempo=0)

	with pytest.raises(ValueError):
		vocalprism.midi_export.render_midi(tones, bend_range=0)


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------

def test_save_and_read_back (tmp_path: pathlib.Path, scale_165) -> None:

	filename = tmp_path / "scale.mid"
	tones = vocalprism.tones.scale_run(scale_165)

	vocalprism.midi_export.save_midi(tones, filename)

	loaded = mido.MidiFile(filename)
	note_ons = [m for m in loaded.tracks[0] if m.type == "note_on"]

	assert len(note_ons) == 8
	assert note_ons[0].note == 52


def test_save_failure_is_logged_and_raised (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	filename = tmp_path / "missing" / "scale.mid"

	with caplog.at_level(logging.ERROR, logger="vocalprism.midi_export"):
		with pytest.raises(OSError):
			vocalprism.midi_export.save_midi(vocalprism.tones.tone(165.0), filename)

	assert "Failed to save MIDI file" in caplog.text
