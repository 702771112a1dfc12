# backend/comingsoon/models/email_request.py
from pydantic import BaseModel, StrictStr


class EmailRequest(BaseModel):
    email: StrictStr
