"""
Member photo uploads.
"""

import logging
import os
import time

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

URL_PREFIX = '/uploads'


def unique_filename(filename, now=None):
    """Prefix the sanitised filename with a millisecond timestamp."""
    millis = int((time.time() if now is None else now) * 1000)
    return f'{millis}-{secure_filename(filename)}'


def save_photo(file_storage, upload_folder):
    """Save an uploaded photo and return its public URL path.

    Returns None when the form carried no file.
    """
    if file_storage is None or not file_storage.filename:
        return None

    filename = unique_filename(file_storage.filename)
    os.makedirs(upload_folder, exist_ok=True)
    file_storage.save(os.path.join(upload_folder, filename))
    logger.debug('Saved upload %s', filename)
    return f'{URL_PREFIX}/{filename}'
