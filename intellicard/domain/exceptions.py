"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CardNotFoundError(DomainException):
    """No card is stored under the requested id"""

    def __init__(self, card_id: str):
        super().__init__(f"Card not found: {card_id}")
        self.card_id = card_id


class TransactionNotFoundError(DomainException):
    """No transaction is stored under the requested id"""

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction not found: {transaction_id}")
        self.transaction_id = transaction_id


class UnknownCardReferenceError(DomainException):
    """Transaction points at a card that is not registered"""

    pass


class InvalidMonthError(DomainException):
    """Month key is not a valid YYYY-MM string"""

    pass
