class GenealogyError(Exception):
    """Base error for the genealogy engine. Carries the HTTP status the API answers with."""
    status_code: int = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

class NotFoundError(GenealogyError):
    status_code = 404

class InvalidArgumentError(GenealogyError):
    status_code = 400

class StoreUnavailableError(GenealogyError):
    """The owner's snapshot could not be fetched. Never retried here."""
    status_code = 503
