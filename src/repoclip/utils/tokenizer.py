# src/repoclip/utils/tokenizer.py
import tiktoken

class Tokenizer:
    _encoding = None
    # Set once no encoding could be loaded, so the download is not retried
    _unavailable = False

    @classmethod
    def get_encoding(cls):
        if cls._encoding is None:
            if cls._unavailable:
                raise RuntimeError("no tiktoken encoding available")
            try:
                try:
                    cls._encoding = tiktoken.get_encoding("cl100k_base")
                except Exception:
                    cls._encoding = tiktoken.get_encoding("p50k_base")
            except Exception:
                cls._unavailable = True
                raise
        return cls._encoding

    @staticmethod
    def count(text: str) -> int:
        """Estimates token count for a given text."""
        try:
            encoding = Tokenizer.get_encoding()
            return len(encoding.encode(text, disallowed_special=()))
        except Exception:
            # No encoding available (e.g. offline): rough estimate
            return len(text) // 4

    @staticmethod
    def count_bytes(data: bytes) -> int:
        return Tokenizer.count(data.decode("utf-8", "replace"))
