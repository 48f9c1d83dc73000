"""Terminal falling-block puzzle games drawn with ANSI escape sequences, with Huffman-code and word-count tools."""

__version__ = "0.1.0"