"""
Vocal Prism - one voice, six musical traditions.

Give it a fundamental frequency (f0), the pitch a voice naturally settles on,
and Vocal Prism describes that single number through six lenses:

- **Pythagorean.** Circle-of-fifths position, pure fourth/fifth/octave above
  f0, and the Pythagorean comma.
- **Vedic / Indian classical.** f0 as Sa: saptak (register), chakra
  association, the 22-shruti system and five ragas scaled onto the voice.
- **Gregorian.** The church mode whose final is f0's nearest natural
  letter, with parallel organum voices.
- **Western classical.** Key signature, speaking-voice category and the
  I-IV-V roots.
- **Tibetan / overtone.** The first 16 harmonics, which of them miss the
  equal-tempered grid, and a matching singing-bowl size.
- **Neuroscience.** Where to sing against an f0 drone to produce beats in
  each EEG band.

Every result rests on one personal scale: eight just-intonation degrees
(Sa to Sa') built on f0 itself, each named against the nearest 12-TET pitch
of a chosen reference tuning (A440 by default).

The engine is pure: no I/O, no clocks, no randomness. Output sinks are
separate - ``vocalprism.tones`` describes what to play, ``vocalprism.midi_export``
writes it to a MIDI file and ``vocalprism.osc`` sends it to a synth.

Minimal example:

    ```python
    import vocalprism

    result = vocalprism.calculate_prism(165.0)

    print(result.narrative.short)
    # Tenor / Low Alto voice at 165.0 Hz (E3), Phrygian mode.

    for degree in result.scale:
        print(degree.svara, degree.hz, degree.nearest_pitch)
    ```

From the command line: ``python -m vocalprism 165 --format json``.

Package-level exports: ``calculate_prism``, ``DomainError``, ``PrismResult``,
``to_dict``, ``verify_math``.
"""

import vocalprism.prism
import vocalprism.verification


calculate_prism = vocalprism.prism.calculate_prism
DomainError = vocalprism.prism.DomainError
PrismResult = vocalprism.prism.PrismResult
to_dict = vocalprism.prism.to_dict
verify_math = vocalprism.verification.verify_math
