import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple, Union

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from discrete_toolkit.algebra.sets import canonical_order
from discrete_toolkit.algorithms import closure, validate
from discrete_toolkit.exceptions import DiscreteToolkitError
from discrete_toolkit.relational.ordering import Ordering

logger = logging.getLogger(__name__)

app = FastAPI()

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Element = Union[int, str]


class ClosureRequest(BaseModel):
    domain: List[Element]
    pairs: List[Tuple[Element, Element]] = []
    reflexive: bool = False
    transitive: bool = True


class OrderingRequest(BaseModel):
    covers: Optional[List[Tuple[Element, Element]]] = None
    domain: Optional[List[Element]] = None


class RelationRequest(BaseModel):
    domain: List[Element]
    pairs: List[Tuple[Element, Element]] = []


def _natural_order(a: Element, b: Element) -> int:
    # integers sort before strings
    ka, kb = (isinstance(a, str), a), (isinstance(b, str), b)
    return (ka > kb) - (ka < kb)


def _sorted_pairs(pairs) -> List[List[Element]]:
    return [[p.a, p.b] for p in canonical_order(pairs)]


@app.exception_handler(DiscreteToolkitError)
def handle_toolkit_error(request: Request, exc: DiscreteToolkitError):
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(
        status_code=422, content={"error": type(exc).__name__, "detail": str(exc)}
    )


@app.post("/api/closure")
def compute_closure(body: ClosureRequest):
    domain = frozenset(body.domain)
    pairs = frozenset(body.pairs)

    if body.transitive:
        pairs = closure.transitive_closure(domain, pairs)
    if body.reflexive:
        pairs = closure.reflexive_closure(domain, pairs)

    matrix = closure.adjacency_matrix(domain, domain, pairs)

    return {
        "pairs": _sorted_pairs(pairs),
        "labels": list(matrix.row_labels),
        "matrix": matrix.to_list(),
    }


@app.post("/api/ordering")
def build_ordering(body: OrderingRequest):
    if body.covers is not None:
        covers = defaultdict(set)
        for a, b in body.covers:
            covers[a].add(b)
        ordering = Ordering.from_hasse(covers, strict=True)
    elif body.domain is not None:
        ordering = Ordering.from_comparator(body.domain, _natural_order)
    else:
        return JSONResponse(
            status_code=422,
            content={"error": "BadRequest", "detail": "Provide covers or domain"},
        )

    return {
        "domain": canonical_order(ordering.domain),
        "covering": _sorted_pairs(ordering.covering_relation),
        "pairs": _sorted_pairs(ordering.relation_set),
        "linear": ordering.is_linear(),
    }


@app.post("/api/validate")
def audit_relation(body: RelationRequest):
    domain = frozenset(body.domain)
    pairs = frozenset(body.pairs)

    report: Dict[str, bool] = {
        axiom.value: ok for axiom, ok in validate.audit(domain, pairs).items()
    }
    report["ordering"] = validate.ordering(domain, pairs)

    return report
