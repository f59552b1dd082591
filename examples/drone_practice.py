import logging

import vocalprism
import vocalprism.midi_export
import vocalprism.osc
import vocalprism.tones

logging.basicConfig(level=logging.INFO)

F0 = 165.0
TEMPO = 72

# Set SEND_OSC to True to voice the practice on a synth listening on 127.0.0.1:9001
# (e.g. a Pure Data patch routing /vocalprism/tone to an oscillator).
SEND_OSC = False

result = vocalprism.calculate_prism(F0)

# Tanpura drone (Sa-Pa-Sa') under the scale sung up once, then a 6 Hz theta beat pair.
drone = vocalprism.tones.drone(F0, "tanpura", duration=16.0, volume=0.4)
run = vocalprism.tones.scale_run(result.scale, tempo=TEMPO)
beat = tuple(
	vocalprism.tones.ToneRequest(t.frequency, t.duration, start=16.0, volume=t.volume, pan=t.pan)
	for t in vocalprism.tones.binaural(F0, beat=6.0, mode="above", duration=8.0)
)

tones = drone + run + beat

vocalprism.midi_export.save_midi(tones, "drone_practice.mid", tempo=TEMPO)

if SEND_OSC:
	sender = vocalprism.osc.ToneSender()
	sender.send_prism(result)
	sender.send_tones(tones)
