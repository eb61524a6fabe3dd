from .permit_dto import PermitCreateRequest, PermitResponse, image_data_uri

__all__ = ["PermitCreateRequest", "PermitResponse", "image_data_uri"]
