from typing import List

from ..models import RegistryEntry

# Demo collection used when the curators' registry is empty or not configured
SAMPLE_REGISTRY: List[RegistryEntry] = [
    RegistryEntry(
        id="sample-1",
        name="Berliner Gramophone",
        date="1895",
        description=(
            "The original gramophone invented by Emile Berliner in 1887. This revolutionary "
            "device used flat disc records instead of cylinders, fundamentally changing the "
            "recording industry."
        ),
    ),
    RegistryEntry(
        id="sample-2",
        name="Victor Talking Machine",
        date="1906",
        description=(
            "An early Victor Talking Machine featuring the famous 'His Master's Voice' "
            "trademark with Nipper the dog. One of the most popular phonographs of its time."
        ),
    ),
    RegistryEntry(
        id="sample-3",
        name="RCA Ribbon Microphone",
        date="1931",
        description=(
            "A classic RCA 44-BX ribbon microphone, considered one of the finest broadcast "
            "microphones ever made. Its distinctive art deco design made it a staple in "
            "recording studios."
        ),
    ),
]
