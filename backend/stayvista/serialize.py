# stayvista/serialize.py
from bson import ObjectId
from bson.errors import InvalidId

from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import ValidationError


def serialize_doc(doc):
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_list(docs):
    return [serialize_doc(d) for d in docs]


def parse_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValidationError(ErrorMessages.INVALID_ID, detail=value)
