# src/repoclip/errors.py

class RepoclipError(Exception): ...
class MissingDependencyError(RepoclipError): ...
class NotARepositoryError(RepoclipError): ...
class EnumerationError(RepoclipError): ...
class ClassificationError(RepoclipError): ...
class FileReadError(RepoclipError): ...
class ClipboardError(RepoclipError): ...
