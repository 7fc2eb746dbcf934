import logging
import os

from flask import current_app

from storefront.extensions import db
from storefront.models.picture import Picture
from storefront.utils.helpers import slugify

logger = logging.getLogger(__name__)


class PictureService:
    """Picture records and their SEO file names"""

    @staticmethod
    def get_picture_by_id(picture_id: str):
        if not picture_id:
            return None
        return db.session.get(Picture, picture_id)

    @staticmethod
    def insert_picture(mime_type: str, seo_filename: str = "", **kwargs) -> Picture:
        picture = Picture(
            mime_type=mime_type,
            seo_filename=seo_filename,
            alt_attribute=kwargs.get("alt_attribute"),
            title_attribute=kwargs.get("title_attribute"),
            virtual_path=kwargs.get("virtual_path"),
        )
        return picture.save()

    @staticmethod
    def delete_picture(picture: Picture):
        """Delete the picture record and its file in the upload folder"""
        if picture.virtual_path:
            path = os.path.join(current_app.config["UPLOAD_FOLDER"], picture.virtual_path)
            if os.path.isfile(path):
                os.remove(path)
        logger.info(f"Deleting picture {picture.id}")
        picture.delete()

    @staticmethod
    def get_picture_se_name(name: str) -> str:
        return slugify(
            name,
            allow_unicode=current_app.config.get("SEO_ALLOW_UNICODE_CHARS_IN_URLS", False),
            max_length=current_app.config.get("SEO_NAME_MAX_LENGTH", 200),
        )

    @staticmethod
    def update_picture_seo_names(picture_id: str, name: str):
        """Rename the picture's SEO file name after its owner; None if no picture"""
        picture = PictureService.get_picture_by_id(picture_id)
        if picture is None:
            return None

        seo_filename = PictureService.get_picture_se_name(name)
        if seo_filename != picture.seo_filename:
            picture.seo_filename = seo_filename
            db.session.commit()
        return picture
