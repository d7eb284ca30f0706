"""stuff test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.

General guidance
- Keep unit tests fast and deterministic (no real I/O); prefer fakes over mocks.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
