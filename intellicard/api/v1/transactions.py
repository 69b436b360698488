"""/v1/transactions - purchase and recurring charge management"""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from intellicard.api.v1.schemas import TransactionIn, TransactionOut
from intellicard.api.dependencies import get_transaction_repository
from intellicard.domain.exceptions import TransactionNotFoundError, UnknownCardReferenceError
from intellicard.infrastructure.store.repositories import TransactionRepository

router = APIRouter()


@router.get("/transactions", response_model=List[TransactionOut])
def list_transactions(
    card_id: Optional[str] = Query(None, description="Only transactions on this card"),
    search: str = Query("", description="Case-insensitive description filter"),
    transactions: TransactionRepository = Depends(get_transaction_repository),
):
    """List transactions, newest purchase first"""
    return [TransactionOut.from_domain(t) for t in transactions.list(card_id=card_id, search=search)]


@router.post("/transactions", response_model=TransactionOut, status_code=201)
def save_transaction(
    body: TransactionIn,
    transactions: TransactionRepository = Depends(get_transaction_repository),
):
    try:
        return TransactionOut.from_domain(transactions.save(body.to_domain()))
    except UnknownCardReferenceError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/transactions/{transaction_id}", response_model=TransactionOut)
def get_transaction(
    transaction_id: str,
    transactions: TransactionRepository = Depends(get_transaction_repository),
):
    try:
        return TransactionOut.from_domain(transactions.get(transaction_id))
    except TransactionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/transactions/{transaction_id}", response_model=TransactionOut)
def update_transaction(
    transaction_id: str,
    body: TransactionIn,
    transactions: TransactionRepository = Depends(get_transaction_repository),
):
    try:
        transactions.get(transaction_id)
        return TransactionOut.from_domain(transactions.save(body.to_domain(transaction_id)))
    except TransactionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnknownCardReferenceError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.delete("/transactions/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    transactions: TransactionRepository = Depends(get_transaction_repository),
):
    try:
        transactions.delete(transaction_id)
    except TransactionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
