"""Status codes, allocators, buffers and byte streams over file descriptors."""

__version__ = "0.1.0"

__all__ = ["allocator", "buffer", "echo", "error", "fd", "file", "formatted", "helloworld", "stream"]