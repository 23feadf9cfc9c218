"""
Router: POST /evaluate
Bezpośrednie wywołanie ewaluatora, bez sesji.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_evaluator
from api.schemas import EvaluateRequest, EvaluateResponse

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
async def evaluate(
    body: EvaluateRequest,
    evaluator=Depends(get_evaluator),
) -> EvaluateResponse:
    result = evaluator.evaluate(body.previous_operand, body.current_operand, body.operation)
    return EvaluateResponse(result=result)
