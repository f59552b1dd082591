import logging

import vocalprism
import vocalprism.pitch
import vocalprism.tuning

logging.basicConfig(level=logging.INFO)

# A typical speaking fundamental. Try 90 (bass), 220 (alto) or 300 (soprano).
F0 = 165.0

result = vocalprism.calculate_prism(F0)

print(result.narrative.short)
print()
print(result.narrative.medium)
print()

# The personal scale: f0 is Sa and every degree is a pure ratio above it.
for degree in result.scale:
	print(f"{degree.svara:<4} {degree.ratio.label:>5}  {vocalprism.pitch.format_hz(degree.hz):>7} Hz  {degree.nearest_pitch} {vocalprism.pitch.format_cents(degree.cents)}")

print()

# Harmonics that miss the piano keys by a quarter tone or more.
for harmonic in result.frameworks.tibetan.overtones:
	if harmonic.deviant:
		print(f"Harmonic {harmonic.harmonic}: {vocalprism.pitch.format_hz(harmonic.hz)} Hz, {harmonic.annotation}")

print()

# Sing inside one of these windows against an f0 drone to beat in theta.
theta = result.frameworks.neuroscience.target("theta")
for window in theta.windows:
	print(f"Theta: {window.lower_hz:g}-{window.upper_hz:g} Hz")

print()

# The same voice named under each historical reference pitch.
for reading in vocalprism.tuning.compare_across_tunings(F0):
	print(f"{reading.tuning.name:<28} {reading.note_name} {vocalprism.pitch.format_cents(reading.cents)}")
