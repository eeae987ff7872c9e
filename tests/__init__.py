"""JSONCLEAN test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows tested at the CLI boundary.
- e2e/          : Full CLI runs exercising logging flags and the flight recorder.

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Functional asserts user-observable results (stdout, stderr, exit status), not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, e2e, property
"""
