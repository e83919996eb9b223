"""Contract tests for `SeekableStream` backends.

Every test here receives a stream from the parametrized ``make_stream`` fixture
and only touches the public interface, so the file and in-memory backends are
held to the same status, offset and read semantics.
"""
