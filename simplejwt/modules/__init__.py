"""
SimpleJWT Modules - Black Box Architecture

Each module is self-contained with a narrow public interface. The middleware
module only depends on the token module's public API.
"""
