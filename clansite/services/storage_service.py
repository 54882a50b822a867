"""
Clan Site - File Store
Uploaded result files live in one disk directory and are served back
under /uploads/<generated name>.
"""
import os
import time
import uuid
from flask import current_app
from werkzeug.utils import secure_filename
from ..errors import StorageError

URL_PREFIX = '/uploads/'


class FileStore:
    """Disk-backed storage addressed by generated filename."""

    def __init__(self, upload_dir):
        self.upload_dir = upload_dir

    def ensure_dir(self):
        os.makedirs(self.upload_dir, exist_ok=True)

    def generate_name(self, original_name):
        """Timestamp-prefixed, filesystem-safe version of the upload name."""
        safe = secure_filename(original_name or '') or 'result'
        filename = f"{int(time.time() * 1000)}-{safe}"
        if os.path.exists(os.path.join(self.upload_dir, filename)):
            filename = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{safe}"
        return filename

    def save(self, file_storage):
        """
        Write an uploaded file and return its public URL.

        Args:
            file_storage: werkzeug FileStorage from request.files

        Returns:
            str: '/uploads/<generated name>'
        """
        try:
            self.ensure_dir()
            filename = self.generate_name(file_storage.filename)
            filepath = os.path.join(self.upload_dir, filename)
            file_storage.save(filepath)
        except OSError as e:
            current_app.logger.error(f"Local upload failed: {e}", exc_info=True)
            raise StorageError('Failed to store the uploaded file') from e

        current_app.logger.info(f"Stored upload: {filepath}")
        return URL_PREFIX + filename

    def path_for_url(self, file_url):
        """Map a public URL back to the file on disk (never outside upload_dir)."""
        if not file_url:
            return None
        filename = os.path.basename(file_url)
        if not filename:
            return None
        return os.path.join(self.upload_dir, filename)

    def exists(self, file_url):
        path = self.path_for_url(file_url)
        return bool(path) and os.path.isfile(path)

    def delete(self, file_url):
        """
        Remove the file behind a public URL. A missing file is not an error.

        Returns:
            bool: True when a file was removed

        Raises:
            StorageError: the file exists but could not be removed
        """
        filepath = self.path_for_url(file_url)
        if not filepath:
            return False
        try:
            os.remove(filepath)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError('Failed to delete the stored file') from e

        current_app.logger.info(f"Local file deleted: {filepath}")
        return True
