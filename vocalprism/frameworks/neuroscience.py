"""Neuroscience framework - brainwave entrainment and biofeedback.

Two tones a few Hz apart beat at their difference frequency. Singing
against an f0 drone therefore lets a voice choose its beat rate, and with
it the EEG band the beat falls into. For every band this module computes
the sung-frequency windows, below and above the drone, that produce a beat
inside that band.
"""

import dataclasses
import math
import typing

import vocalprism.bands
import vocalprism.pitch


ENTRAINMENT = (
	"Rhythmic stimuli can influence EEG patterns. This works through beat frequencies, the "
	"difference between two tones, not through specific Hz values in isolation. Listening to "
	"432 Hz doesn't do anything special; creating a 7 Hz beat by singing near a drone does."
)

VAGAL_TONE = (
	"Humming, chanting, and sustained vocalization stimulate the vagus nerve through "
	"vibration in the throat and chest. The specific pitch matters less than the sustained, "
	"resonant quality."
)

INSIGHT = (
	"You are the biofeedback instrument. Most binaural beat apps play frequencies AT you; "
	"singing against a drone lets you CREATE the beat with your own voice."
)


@dataclasses.dataclass(frozen=True)
class FrequencyWindow:

	"""A sung-frequency range ``[lower_hz, upper_hz]``; ``upper_hz`` may be ``math.inf``."""

	lower_hz: float
	upper_hz: float


	def contains (self, hz: float) -> bool:

		return self.lower_hz <= hz <= self.upper_hz


@dataclasses.dataclass(frozen=True)
class BrainwaveTarget:

	"""
	Where to sing against an f0 drone to beat within one EEG band.

	Attributes:
		key: Band key (``"delta"`` ... ``"gamma"``).
		beat_low: Lowest beat frequency of the band in Hz.
		beat_high: Highest beat frequency (``math.inf`` for gamma).
		windows: Sung frequencies producing such a beat, below f0 then above it.
	"""

	key: str
	state: str
	description: str
	color: str
	beat_low: float
	beat_high: float
	windows: typing.Tuple[FrequencyWindow, ...]
	instruction: str


@dataclasses.dataclass(frozen=True)
class NeuroscienceResult:

	brainwave_map: typing.Tuple[BrainwaveTarget, ...]
	practice: typing.Tuple[str, ...]
	entrainment: str
	vagal_tone: str
	insight: str


	def target (self, key: str) -> BrainwaveTarget:

		"""Return the target for one band key."""

		for target in self.brainwave_map:
			if target.key == key:
				return target

		raise KeyError(key)


def beat_frequency (freq1: float, freq2: float) -> float:

	"""Beat rate heard when two tones sound together."""

	return abs(freq1 - freq2)


def brainwave_state (beat_hz: float) -> vocalprism.bands.BrainwaveState:

	"""Classify a beat frequency into an EEG band.

	Beats slower than 0.5 Hz are reported as ``"Unison"``.

	Example:
		```python
		brainwave_state(6.0).key   # "theta"
		brainwave_state(-10).key   # "alpha" (sign ignored)
		brainwave_state(0.2).key   # "unison"
		```
	"""

	band = vocalprism.bands.BRAINWAVE_BANDS.lookup(abs(beat_hz))

	if band is None:
		return vocalprism.bands.UNISON_STATE

	return band.value


def beat_windows (f0: float, beat_low: float, beat_high: float) -> typing.Tuple[FrequencyWindow, ...]:

	"""Frequencies below and above ``f0`` whose beat against it lies in ``[beat_low, beat_high]``.

	The window below ``f0`` is clipped at 0 Hz and dropped if nothing is left.
	"""

	windows = []

	below_upper = f0 - beat_low
	if below_upper > 0:
		windows.append(FrequencyWindow(lower_hz=max(0.0, f0 - beat_high), upper_hz=below_upper))

	windows.append(FrequencyWindow(lower_hz=f0 + beat_low, upper_hz=f0 + beat_high))

	return tuple(windows)


def _instruction (f0: float, beat_low: float, beat_high: float) -> str:

	drone = vocalprism.pitch.format_hz(f0)

	if math.isinf(beat_high):
		return f"Sing {beat_low:g}+ Hz away from your {drone} Hz drone"

	return f"Sing {beat_low:g}-{beat_high:g} Hz above or below your {drone} Hz drone"


def brainwave_map (f0: float) -> typing.Tuple[BrainwaveTarget, ...]:

	"""One :class:`BrainwaveTarget` per EEG band, delta to gamma."""

	targets = []

	for band in vocalprism.bands.BRAINWAVE_BANDS:
		targets.append(BrainwaveTarget(
			key=band.value.key,
			state=band.value.state,
			description=band.value.description,
			color=band.value.color,
			beat_low=band.lower,
			beat_high=band.upper,
			windows=beat_windows(f0, band.lower, band.upper),
			instruction=_instruction(f0, band.lower, band.upper),
		))

	return tuple(targets)


def practice_steps (f0: float) -> typing.Tuple[str, ...]:

	return (
		f"Play your Sa drone ({vocalprism.pitch.format_hz(f0)} Hz)",
		"Hum exactly at the drone pitch and notice the stillness (0 Hz beat)",
		"Slowly slide your pitch up by a few Hz and hear the beating begin",
		"Slide to about 6 Hz above: you're in Theta, the creative zone",
		"Return to unison and feel the settling",
	)


def analyze_neuroscience (f0: float) -> NeuroscienceResult:

	"""Neuroscience reading of ``f0``.

	Example:
		```python
		result = analyze_neuroscience(165.0)
		theta = result.target("theta")
		theta.windows  # (FrequencyWindow(157.0, 161.0), FrequencyWindow(169.0, 173.0))
		```
	"""

	return NeuroscienceResult(
		brainwave_map=brainwave_map(f0),
		practice=practice_steps(f0),
		entrainment=ENTRAINMENT,
		vagal_tone=VAGAL_TONE,
		insight=INSIGHT,
	)
