import os.path
from collections import namedtuple


class ArtifactSet(namedtuple('ArtifactSet', ['preprocessed', 'assembly', 'executable'])):
    pass


def names_for(source: str) -> ArtifactSet:
    # Only the last extension of the file name is stripped: a.tar.c -> a.tar.
    # A name without an extension is its own stem.
    stem, _ = os.path.splitext(source)
    return ArtifactSet(stem + '.i', stem + '.s', stem)
