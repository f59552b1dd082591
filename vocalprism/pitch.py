"""Pitch kernel - Hz, MIDI, note name and cents conversions.

Every function here is pure and takes the A4 reference pitch as an explicit
argument (default 440 Hz), so the same frequency can be named under any
tuning standard without touching shared state.

Module-level constants:
- `A4_MIDI`: MIDI note number of A4 (69)
- `DEFAULT_A4`: Default reference pitch in Hz (440.0)
- `NOTE_NAMES`: The 12 pitch-class names, spelled with sharps

Example:
	```python
	import vocalprism.pitch

	vocalprism.pitch.freq_to_midi(440.0)                  # 69.0
	str(vocalprism.pitch.freq_to_note_name(165.0))        # "E3"
	vocalprism.pitch.cents_between(247.5, 246.94)         # ~ +3.9
	vocalprism.pitch.freq_to_note_name(440.0, a4=432.0)   # A4 is now ~+31 cents sharp
	```
"""

import dataclasses
import math
import typing


A4_MIDI = 69
DEFAULT_A4 = 440.0

NOTE_NAMES: typing.Tuple[str, ...] = (
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
)


@dataclasses.dataclass(frozen=True)
class NoteName:

	"""
	A pitch class plus octave, as derived from a rounded MIDI number.

	Attributes:
		pitch_class: One of ``NOTE_NAMES`` (e.g. ``"E"``, ``"F#"``).
		octave: Scientific pitch octave (C4 = middle C).
		midi: The rounded MIDI note number the name was derived from.
	"""

	pitch_class: str
	octave: int
	midi: int


	@property
	def pc (self) -> int:

		"""Pitch class as an integer (0 = C ... 11 = B)."""

		return NOTE_NAMES.index(self.pitch_class)


	def __str__ (self) -> str:

		return f"{self.pitch_class}{self.octave}"


def round_half_up (value: float) -> int:

	"""Round to the nearest integer, ties toward +inf.

	Python's built-in ``round()`` rounds ties to even, so a pitch exactly
	between two semitones would be named inconsistently.
	"""

	return math.floor(value + 0.5)


def freq_to_midi (freq: float, a4: float = DEFAULT_A4) -> float:

	"""Convert a frequency to a continuous (unrounded) MIDI note number.

	Parameters:
		freq: Frequency in Hz. Must be positive; ``math.log2`` raises
			``ValueError`` for zero or negative input.
		a4: Reference pitch for A4 in Hz.

	Returns:
		``69 + 12 * log2(freq / a4)``

	Example:
		```python
		freq_to_midi(440.0)         # 69.0
		freq_to_midi(220.0)         # 57.0
		freq_to_midi(432.0, 432.0)  # 69.0
		```
	"""

	return A4_MIDI + 12 * math.log2(freq / a4)


def midi_to_freq (midi: float, a4: float = DEFAULT_A4) -> float:

	"""Convert a (possibly fractional) MIDI note number to Hz.

	Exact inverse of :func:`freq_to_midi` for the same ``a4``.
	"""

	return a4 * 2 ** ((midi - A4_MIDI) / 12)


def freq_to_note_name (freq: float, a4: float = DEFAULT_A4) -> NoteName:

	"""Name the nearest equal-tempered pitch to a frequency.

	Parameters:
		freq: Frequency in Hz.
		a4: Reference pitch for A4 in Hz.

	Returns:
		A :class:`NoteName`; ``str()`` of it gives e.g. ``"E3"``.

	Example:
		```python
		str(freq_to_note_name(440.0))   # "A4"
		str(freq_to_note_name(165.0))   # "E3"
		str(freq_to_note_name(261.63))  # "C4"
		```
	"""

	midi = round_half_up(freq_to_midi(freq, a4))
	pitch_class = NOTE_NAMES[((midi % 12) + 12) % 12]
	octave = math.floor(midi / 12) - 1

	return NoteName(pitch_class=pitch_class, octave=octave, midi=midi)


def freq_to_pitch_class (freq: float, a4: float = DEFAULT_A4) -> str:

	"""Return only the pitch-class name of the nearest pitch (e.g. ``"E"``)."""

	return freq_to_note_name(freq, a4).pitch_class


def freq_to_nearest_standard (freq: float, a4: float = DEFAULT_A4) -> float:

	"""Return the frequency of the nearest equal-tempered pitch."""

	return midi_to_freq(round_half_up(freq_to_midi(freq, a4)), a4)


def cents_between (freq1: float, freq2: float) -> float:

	"""Signed distance from ``freq2`` to ``freq1`` in cents.

	Positive means ``freq1`` is sharp of ``freq2``; negative means flat.
	"""

	return 1200 * math.log2(freq1 / freq2)


def ratio_to_cents (ratio: float) -> float:

	"""Convert a frequency ratio to cents (``1200 * log2(ratio)``)."""

	return 1200 * math.log2(ratio)


def cents_to_ratio (cents: float) -> float:

	"""Convert cents to a frequency ratio (``2 ** (cents / 1200)``)."""

	return 2 ** (cents / 1200)


def note_at_interval (f0: float, ratio: float, a4: float = DEFAULT_A4) -> NoteName:

	"""Name the pitch a given ratio above ``f0``."""

	return freq_to_note_name(f0 * ratio, a4)


# ---------------------------------------------------------------------------
# Canonical rounding and formatting.
#
# Display precision depends on magnitude: 2 decimals below 100 Hz, 1 decimal
# up to 999.x Hz, whole numbers from 1000 Hz.
# ---------------------------------------------------------------------------

def hz_decimals (hz: float) -> int:

	"""Number of decimal places used to display a frequency."""

	if hz >= 1000:
		return 0

	if hz >= 100:
		return 1

	return 2


def round_hz (hz: float) -> float:

	"""Round a frequency to its canonical display precision.

	Example:
		```python
		round_hz(69.4999)   # 69.5
		round_hz(247.56)    # 247.6
		round_hz(2100.4)    # 2100.0
		```
	"""

	return round(hz, hz_decimals(hz))


def format_hz (hz: float) -> str:

	"""Format a frequency with its canonical precision (``"69.50"``, ``"165.0"``, ``"1320"``)."""

	return f"{hz:.{hz_decimals(hz)}f}"


def format_cents (cents: float) -> str:

	"""Format a cent deviation as ``"+2¢"``, ``"-14¢"`` or ``"±0¢"``."""

	rounded = round_half_up(cents)

	if rounded == 0:
		return "±0¢"

	sign = "+" if rounded > 0 else ""

	return f"{sign}{rounded}¢"
