from emitter.testing import emitter_fixture  # noqa: F401
