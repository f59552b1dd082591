"""
Tone requests - what to play, described as data.

The engine never produces sound. Anything that can play or render tones
(the MIDI exporter, the OSC sender, an audio front end) consumes tuples of
:class:`ToneRequest`. The builders here turn prism results into such tuples.

Example:
	```python
	import vocalprism.prism
	import vocalprism.tones

	result = vocalprism.prism.calculate_prism(165.0)

	run = vocalprism.tones.scale_run(result.scale, tempo=120)
	pair = vocalprism.tones.binaural(165.0, beat=6.0)   # 162 Hz left, 168 Hz right
	```
"""

import dataclasses
import math
import typing

import vocalprism.ratios
import vocalprism.scale


DEFAULT_DURATION = 0.5
DEFAULT_VOLUME = 0.3
DEFAULT_TEMPO = 120

# Fraction of each sequence slot that actually sounds.
SEQUENCE_GATE = 0.9

BINAURAL_MODES = ("centered", "above", "below")

# Just-intonation degrees (1 = Sa, 5 = Pa, 8 = Sa') sounded by each drone preset.
DRONE_PRESETS: typing.Dict[str, typing.Tuple[int, ...]] = {
	"tanpura": (1, 5, 8),
	"sa-pa": (1, 5),
	"raga-base": (1, 5, 8, 4),
	"ison": (1,),
	"organum": (1, 4, 5),
}


@dataclasses.dataclass(frozen=True)
class ToneRequest:

	"""
	A single tone to be played.

	Attributes:
		frequency: Pitch in Hz (must be positive).
		duration: Length in seconds (must be positive).
		start: Offset in seconds from the start of the group.
		volume: Linear gain, 0.0 to 1.0.
		pan: Stereo position, -1.0 (left) to 1.0 (right).
	"""

	frequency: float
	duration: float = DEFAULT_DURATION
	start: float = 0.0
	volume: float = DEFAULT_VOLUME
	pan: float = 0.0

	def __post_init__ (self) -> None:

		if not self.frequency > 0:
			raise ValueError(f"Frequency must be positive, got {self.frequency}")

		if not self.duration > 0:
			raise ValueError(f"Duration must be positive, got {self.duration}")

		if self.start < 0:
			raise ValueError("Start cannot be negative")

		if not 0.0 <= self.volume <= 1.0:
			raise ValueError(f"Volume must be between 0 and 1, got {self.volume}")

		if not -1.0 <= self.pan <= 1.0:
			raise ValueError(f"Pan must be between -1 and 1, got {self.pan}")


	@property
	def end (self) -> float:

		return self.start + self.duration


def tone (
	frequency: float,
	duration: float = DEFAULT_DURATION,
	start: float = 0.0,
	volume: float = DEFAULT_VOLUME,
	pan: float = 0.0
) -> typing.Tuple[ToneRequest, ...]:

	return (ToneRequest(frequency, duration, start, volume, pan),)


def chord (
	frequencies: typing.Sequence[float],
	duration: float = DEFAULT_DURATION,
	start: float = 0.0,
	volume: float = DEFAULT_VOLUME
) -> typing.Tuple[ToneRequest, ...]:

	"""Simultaneous tones sharing ``volume`` as ``volume / sqrt(n)`` each."""

	if not frequencies:
		return ()

	per_note = volume / math.sqrt(len(frequencies))

	return tuple(ToneRequest(f, duration, start, per_note) for f in frequencies)


def sequence (
	notes: typing.Sequence[typing.Union[float, typing.Tuple[float, float]]],
	tempo: float = DEFAULT_TEMPO,
	volume: float = DEFAULT_VOLUME,
	start: float = 0.0
) -> typing.Tuple[ToneRequest, ...]:

	"""
	Tones one after another.

	Each note is either a frequency (lasting one beat at ``tempo``) or a
	``(frequency, seconds)`` pair. A note sounds for ``SEQUENCE_GATE`` of its
	slot so that repeated pitches stay distinct.
	"""

	if tempo <= 0:
		raise ValueError("Tempo must be positive")

	beat = 60.0 / tempo
	position = start
	tones = []

	for note in notes:

		if isinstance(note, tuple):
			frequency, slot = note
		else:
			frequency, slot = note, beat

		tones.append(ToneRequest(frequency, slot * SEQUENCE_GATE, position, volume))
		position += slot

	return tuple(tones)


def interval (
	base: float,
	ratio: float,
	sequential: bool = False,
	delay: float = 0.3,
	duration: float = DEFAULT_DURATION,
	volume: float = DEFAULT_VOLUME
) -> typing.Tuple[ToneRequest, ...]:

	"""``base`` and ``base * ratio``, together or ``delay`` seconds apart."""

	if sequential:
		return (
			ToneRequest(base, duration, 0.0, volume),
			ToneRequest(base * ratio, duration, delay, volume),
		)

	return chord([base, base * ratio], duration=duration, volume=volume)


def harmonic_series (
	fundamental: float,
	harmonics: int = 8,
	sequential: bool = True,
	delay: float = 0.3,
	duration: float = DEFAULT_DURATION
) -> typing.Tuple[ToneRequest, ...]:

	"""Partials 1 to ``harmonics``, as an arpeggio or stacked with ``1/n`` decay."""

	frequencies = [fundamental * n for n in range(1, harmonics + 1)]

	if sequential:
		return sequence([(f, delay) for f in frequencies])

	return tuple(
		ToneRequest(f, duration, 0.0, DEFAULT_VOLUME / n)
		for n, f in enumerate(frequencies, start=1)
	)


def drone (
	f0: float,
	preset: str = "tanpura",
	duration: float = 8.0,
	volume: float = DEFAULT_VOLUME
) -> typing.Tuple[ToneRequest, ...]:

	"""Sustained just-intonation voices above ``f0`` for a named preset.

	Raises:
		ValueError: If ``preset`` is not one of ``DRONE_PRESETS``.
	"""

	if preset not in DRONE_PRESETS:
		raise ValueError(f"Unknown drone preset: {preset!r}. Available: {', '.join(DRONE_PRESETS)}")

	frequencies = [
		vocalprism.ratios.JUST_INTONATION[degree - 1].ratio.of(f0)
		for degree in DRONE_PRESETS[preset]
	]

	return chord(frequencies, duration=duration, volume=volume)


def binaural (
	f0: float,
	beat: float,
	mode: str = "centered",
	duration: float = 10.0,
	volume: float = DEFAULT_VOLUME
) -> typing.Tuple[ToneRequest, ToneRequest]:

	"""
	A left/right tone pair whose difference is ``beat`` Hz.

	Modes:
		``"centered"``: ``f0 - beat/2`` and ``f0 + beat/2``.
		``"above"``: ``f0`` and ``f0 + beat``.
		``"below"``: ``f0 - beat`` and ``f0``.
	"""

	if mode == "centered":
		left, right = f0 - beat / 2, f0 + beat / 2
	elif mode == "above":
		left, right = f0, f0 + beat
	elif mode == "below":
		left, right = f0 - beat, f0
	else:
		raise ValueError(f"Unknown binaural mode: {mode!r}. Available: {', '.join(BINAURAL_MODES)}")

	return (
		ToneRequest(left, duration, 0.0, volume, pan=-1.0),
		ToneRequest(right, duration, 0.0, volume, pan=1.0),
	)


def scale_run (
	scale: typing.Sequence[vocalprism.scale.ScaleDegree],
	tempo: float = DEFAULT_TEMPO,
	volume: float = DEFAULT_VOLUME
) -> typing.Tuple[ToneRequest, ...]:

	"""The degrees of a personal scale played upward, one per beat."""

	return sequence([degree.hz for degree in scale], tempo=tempo, volume=volume)
