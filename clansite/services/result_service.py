# clansite/services/result_service.py
"""Result file lifecycle - upload, replace, delete"""

from flask import current_app
from ..extensions import db
from ..errors import NotFoundError, StorageError, ValidationError
from ..models.result import Result
from ..utils.helpers import commit_or_raise, storage_guard, text_field, mask_phone


class ResultService:
    """
    Result rows own their stored file: replacing or deleting a row is
    responsible for removing the file it referenced.

    File and row operations are separate steps. A crash between them can
    leave an orphaned file on disk.
    """

    def __init__(self, file_store):
        self.file_store = file_store

    @staticmethod
    def _has_file(file_storage):
        return file_storage is not None and bool(file_storage.filename)

    def get_result(self, result_id):
        if not result_id:
            raise NotFoundError('Result not found')
        with storage_guard('fetching result'):
            result = db.session.get(Result, result_id)
        if result is None:
            raise NotFoundError('Result not found')
        return result

    def upload_result(self, player_phone, player_name, file_storage):
        """
        Store a result file and its row.

        Raises:
            ValidationError: no file attached
            StorageError: file or row could not be written
        """
        if not self._has_file(file_storage):
            raise ValidationError('No file selected')

        file_url = self.file_store.save(file_storage)

        result = Result(
            player_phone=text_field(player_phone),
            player_name=player_name or None,
            file_url=file_url,
        )
        db.session.add(result)
        try:
            commit_or_raise('uploading result')
        except StorageError:
            self._discard(file_url)
            raise

        current_app.logger.info(
            f"Result uploaded: id={result.id}, phone={mask_phone(result.player_phone)}, file={file_url}"
        )
        return result

    def update_result(self, result_id, player_phone=None, player_name=None, file_storage=None):
        """
        Update player fields and optionally swap the file.

        The superseded file is removed after the row points at the new one;
        failing to remove it is logged and does not undo the update.
        """
        result = self.get_result(result_id)

        if player_phone is not None:
            result.player_phone = text_field(player_phone)
        if player_name is not None:
            result.player_name = player_name or None

        old_url = None
        new_url = None
        if self._has_file(file_storage):
            new_url = self.file_store.save(file_storage)
            old_url = result.file_url
            result.file_url = new_url

        try:
            commit_or_raise('updating result')
        except StorageError:
            if new_url:
                self._discard(new_url)
            raise

        if old_url and old_url != new_url:
            self._discard(old_url)

        current_app.logger.info(f"Result updated: id={result_id}, file={result.file_url}")
        return result

    def delete_result(self, result_id):
        """
        Delete the stored file (a missing file is fine), then the row.

        Raises:
            NotFoundError: no result has this id
            StorageError: the file or the row could not be removed
        """
        result = self.get_result(result_id)

        self.file_store.delete(result.file_url)

        db.session.delete(result)
        commit_or_raise('deleting result')

        current_app.logger.info(f"Result deleted: id={result_id}")

    def _discard(self, file_url):
        """Best-effort file removal."""
        try:
            self.file_store.delete(file_url)
        except StorageError as e:
            current_app.logger.warning(f"Could not delete old file {file_url}: {e}")
