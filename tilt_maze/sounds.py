"""Synthesized sound effects."""

import threading

import numpy as np
import pygame

SAMPLE_RATE = 44100


def synthesize_wave(frequency, duration, volume=0.3, wave_type='sine'):
    """Return a 16-bit stereo sample array for a tone"""
    n_samples = int(SAMPLE_RATE * duration)
    t = np.linspace(0, duration, n_samples, False)

    if wave_type == 'square':
        wave = np.sign(np.sin(2 * np.pi * frequency * t))
    elif wave_type == 'sawtooth':
        wave = 2 * (t * frequency - np.floor(0.5 + t * frequency))
    else:
        wave = np.sin(2 * np.pi * frequency * t)

    # Apply envelope to avoid clicks
    envelope = np.ones(n_samples)
    attack = min(int(0.01 * SAMPLE_RATE), n_samples)
    release = min(int(0.05 * SAMPLE_RATE), n_samples - attack)
    envelope[:attack] = np.linspace(0, 1, attack)
    if release:
        envelope[-release:] = np.linspace(1, 0, release)

    wave = wave * envelope * volume

    # Convert to 16-bit stereo
    wave = (wave * 32767).astype(np.int16)
    return np.column_stack((wave, wave))


class SoundGenerator:
    """Generate simple synthesized sounds"""

    @staticmethod
    def generate_tone(frequency, duration, volume=0.3, wave_type='sine'):
        """Generate a tone with given frequency and duration"""
        return pygame.sndarray.make_sound(synthesize_wave(frequency, duration, volume, wave_type))

    @staticmethod
    def generate_rotate_sound():
        """Short rising sweep for a maze turn"""
        return [SoundGenerator.generate_tone(freq, 0.04, 0.15, 'sawtooth') for freq in (300, 380, 460)]

    @staticmethod
    def generate_wall_sound():
        """Thud sound for hitting wall"""
        return SoundGenerator.generate_tone(100, 0.08, 0.2, 'square')

    @staticmethod
    def generate_victory_sound():
        """Triumphant arpeggio for reaching the exit"""
        sounds = []
        sounds.append(SoundGenerator.generate_tone(523, 0.1, 0.4, 'sine'))   # C
        sounds.append(SoundGenerator.generate_tone(659, 0.1, 0.4, 'sine'))   # E
        sounds.append(SoundGenerator.generate_tone(784, 0.1, 0.4, 'sine'))   # G
        sounds.append(SoundGenerator.generate_tone(1047, 0.2, 0.4, 'sine'))  # High C
        return sounds


def play_sound_sequence(sounds, delay=150):
    """Play a sequence of sounds with delay"""
    def play():
        for i, sound in enumerate(sounds):
            if i:
                pygame.time.wait(delay)
            sound.play()

    thread = threading.Thread(target=play, daemon=True)
    thread.start()
