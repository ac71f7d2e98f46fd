"""
# pngchunks: file formats at the chunk level.

A file format is described declaratively: a subclass of Chunk lists, as class
attributes and in order, the fields composing its binary representation.
Two basic main operations are defined for the file format and its sub components:

 1. unpack(): the more straightforward, i.e., reading the binary data
    and build a high-level representation of that.
    Each field knows how many bytes needs to read, possibly looking at the
    fields already unpacked (see properties.Dependency).

 2. pack(): encode the high-level representation into binary data.

A chunk built from values (instead of binary data) derives on its own the
fields depending on others, like lengths and checksums, so that pack()
always returns consistent data.

Any problem while unpacking raises a subclass of exceptions.UnpackException
carrying the chain of fields and the offset where the problem was found.
"""
