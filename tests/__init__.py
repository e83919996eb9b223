"""SEEKSTREAM test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior/invariants enforced across every SeekableStream backend.
- integration/  : Real interactions with the local filesystem.
- e2e/          : The `seekstream` CLI driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic; the memory backend stands in for files there.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
