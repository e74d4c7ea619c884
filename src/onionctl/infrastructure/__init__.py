"""Infrastructure layer — file I/O around the configuration core.

Never imported by domain or services.
"""
