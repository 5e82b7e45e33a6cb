from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RelatedDocument(BaseModel):
    """A reference document returned by the document-search endpoint.

    The backend may use either the English or the Indonesian field names
    (``judul``/``abstrak``). Unknown fields are kept as extras so the record
    stays opaque. Instances are frozen and compare by value, which makes them
    usable as selection-set members.

    Attributes:
        title: Document title.
        abstract: Document abstract, used as chat context.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    title: str = Field("", validation_alias=AliasChoices("title", "judul"))
    abstract: str = Field("", validation_alias=AliasChoices("abstract", "abstrak"))


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        query: The user's message.
        context: Concatenated abstracts of the selected documents.
        chat_history: Opaque integer list forwarded as-is.
    """

    query: str
    context: str
    chat_history: list[int] = Field(default_factory=list)


class ChatResponse(BaseModel):
    """Response from the chat endpoint."""

    response: str


class DocumentRequest(BaseModel):
    """Request payload for the related-documents endpoint.

    Attributes:
        title: Search text.
        number: Maximum number of documents to return.
    """

    title: str
    number: int = Field(3, ge=1)


class DocumentResponse(BaseModel):
    """Response from the related-documents endpoint."""

    related_documents: list[RelatedDocument]

    @property
    def documents(self) -> list[RelatedDocument]:
        return self.related_documents
