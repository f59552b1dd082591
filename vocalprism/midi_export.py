"""
Render tone requests to a Standard MIDI File.

MIDI notes are equal-tempered, so each tone is written as its nearest note
plus a pitch-bend carrying the remaining cents. Pitch bend applies to a whole
channel, so tones that overlap in time are given separate channels (the
drum channel 9 is never used). Pan is sent as CC 10.
"""

import logging
import os
import typing

import mido

import vocalprism.pitch
import vocalprism.tones


logger = logging.getLogger(__name__)


TICKS_PER_BEAT = 480
DEFAULT_TEMPO = 120
DEFAULT_BEND_RANGE = 2.0

DRUM_CHANNEL = 9
MELODIC_CHANNELS: typing.Tuple[int, ...] = tuple(c for c in range(16) if c != DRUM_CHANNEL)

PAN_CC = 10
PITCHWHEEL_MAX = 8191
PITCHWHEEL_MIN = -8192

# Sort order of events sharing a tick: release before setting up the next note.
_NOTE_OFF, _CONTROL, _PITCHWHEEL, _NOTE_ON = range(4)


def seconds_to_ticks (seconds: float, tempo: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:

	return vocalprism.pitch.round_half_up(seconds * tempo / 60.0 * ticks_per_beat)


def split_frequency (frequency: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> typing.Tuple[int, float]:

	"""Return the nearest MIDI note and the deviation from it in cents.

	Raises:
		ValueError: If the nearest note is outside 0-127.
	"""

	midi = vocalprism.pitch.freq_to_midi(frequency, a4)
	note = vocalprism.pitch.round_half_up(midi)

	if not 0 <= note <= 127:
		raise ValueError(f"Frequency {frequency} Hz is outside the MIDI note range")

	return note, (midi - note) * 100


def cents_to_pitchwheel (cents: float, bend_range: float = DEFAULT_BEND_RANGE) -> int:

	"""Pitch-wheel value for a deviation in cents, given a bend range in semitones."""

	value = vocalprism.pitch.round_half_up(cents / (bend_range * 100) * 8192)

	return max(PITCHWHEEL_MIN, min(PITCHWHEEL_MAX, value))


def pan_to_cc (pan: float) -> int:

	return max(0, min(127, vocalprism.pitch.round_half_up((pan + 1) / 2 * 127)))


def volume_to_velocity (volume: float) -> int:

	return max(1, min(127, vocalprism.pitch.round_half_up(volume * 127)))


def tone_ticks (tone: vocalprism.tones.ToneRequest, tempo: float = DEFAULT_TEMPO) -> typing.Tuple[int, int]:

	"""Start and end tick of ``tone``. A tone always lasts at least one tick."""

	start = seconds_to_ticks(tone.start, tempo)

	return start, max(start + 1, seconds_to_ticks(tone.end, tempo))


def assign_channels (tones: typing.Sequence[vocalprism.tones.ToneRequest], tempo: float = DEFAULT_TEMPO) -> typing.List[int]:

	"""
	Give each tone a channel so that no two overlapping tones share one.

	Overlap is judged on the rendered ticks at ``tempo``. Tones are placed in
	start order on the lowest channel that is free by the time they start.
	The result is aligned with ``tones``.

	Raises:
		ValueError: If more tones overlap than there are melodic channels.
	"""

	spans = [tone_ticks(tone, tempo) for tone in tones]
	free_at = {channel: 0 for channel in MELODIC_CHANNELS}
	channels = [0] * len(tones)

	for index in sorted(range(len(tones)), key=lambda i: spans[i][0]):

		start, end = spans[index]

		for channel in MELODIC_CHANNELS:
			if free_at[channel] <= start:
				break
		else:
			raise ValueError(f"More than {len(MELODIC_CHANNELS)} overlapping tones at {tones[index].start}s")

		channels[index] = channel
		free_at[channel] = end

	return channels


def render_midi (
	tones: typing.Sequence[vocalprism.tones.ToneRequest],
	tempo: float = DEFAULT_TEMPO,
	bend_range: float = DEFAULT_BEND_RANGE,
	a4: float = vocalprism.pitch.DEFAULT_A4,
	name: str = "vocalprism"
) -> mido.MidiFile:

	"""Build a type-1 MIDI file containing ``tones``."""

	if tempo <= 0:
		raise ValueError("Tempo must be positive")

	if bend_range <= 0:
		raise ValueError("Bend range must be positive")

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = TICKS_PER_BEAT

	track = mido.MidiTrack()
	mid.tracks.append(track)

	track.append(mido.MetaMessage("track_name", name=name, time=0))
	track.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(tempo), time=0))

	events: typing.List[typing.Tuple[int, int, mido.Message]] = []

	for tone, channel in zip(tones, assign_channels(tones, tempo)):

		note, cents = split_frequency(tone.frequency, a4)
		start, end = tone_ticks(tone, tempo)
		velocity = volume_to_velocity(tone.volume)

		events.append((start, _CONTROL, mido.Message("control_change", channel=channel, control=PAN_CC, value=pan_to_cc(tone.pan))))
		events.append((start, _PITCHWHEEL, mido.Message("pitchwheel", channel=channel, pitch=cents_to_pitchwheel(cents, bend_range))))
		events.append((start, _NOTE_ON, mido.Message("note_on", channel=channel, note=note, velocity=velocity)))
		events.append((end, _NOTE_OFF, mido.Message("note_off", channel=channel, note=note, velocity=0)))

	events.sort(key=lambda event: (event[0], event[1]))

	last_tick = 0

	for tick, _, message in events:
		message.time = tick - last_tick
		track.append(message)
		last_tick = tick

	logger.debug(f"Rendered {len(tones)} tones to {len(events)} MIDI events")

	return mid


def save_midi (
	tones: typing.Sequence[vocalprism.tones.ToneRequest],
	filename: typing.Union[str, os.PathLike],
	tempo: float = DEFAULT_TEMPO,
	bend_range: float = DEFAULT_BEND_RANGE,
	a4: float = vocalprism.pitch.DEFAULT_A4
) -> mido.MidiFile:

	"""Render ``tones`` and write them to ``filename``.

	Raises:
		OSError: If the file cannot be written (logged, then re-raised).
	"""

	mid = render_midi(tones, tempo=tempo, bend_range=bend_range, a4=a4)

	logger.info(f"Saving MIDI file ({len(tones)} tones) to {filename}...")

	try:
		mid.save(filename)
	except OSError as e:
		logger.error(f"Failed to save MIDI file: {e}")
		raise

	logger.info(f"Saved {filename}")

	return mid
