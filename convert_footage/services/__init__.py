"""
Services Package for convert-footage.

- **Discovery (`file_processing_service.py`):** walks a folder and yields the
  files whose content is detected as video.
- **Classifier (`classifier.py`):** detects a file's MIME type with libmagic.
- **File Converter (`converter.py`):** decides, per file, whether a conversion is
  needed.
- **Transcoder (`transcoder.py`):** runs FFmpeg.
"""
