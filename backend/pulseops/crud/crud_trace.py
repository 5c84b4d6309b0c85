from typing import List, Optional
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.trace import Span, Trace
from pulseops.schemas.trace import SpanCreate, TraceCreate


class CRUDTrace(CRUDBase[Trace, TraceCreate, TraceCreate]):
    def list(self, db: Session) -> List[Trace]:
        """Most recent first"""
        return db.query(Trace).order_by(Trace.start_time.desc(), Trace.id.desc()).all()

    def get_by_trace_id(self, db: Session, *, trace_id: str) -> Optional[Trace]:
        return db.query(Trace).filter(Trace.trace_id == trace_id).first()

    def count(self, db: Session) -> int:
        return db.query(Trace).count()


class CRUDSpan(CRUDBase[Span, SpanCreate, SpanCreate]):
    def get_by_trace_id(self, db: Session, *, trace_id: str) -> List[Span]:
        """Spans of one trace in start order"""
        return (
            db.query(Span)
            .filter(Span.trace_id == trace_id)
            .order_by(Span.start_time, Span.id)
            .all()
        )

    def get_by_span_id(self, db: Session, *, span_id: str) -> Optional[Span]:
        return db.query(Span).filter(Span.span_id == span_id).first()


trace = CRUDTrace(Trace)
span = CRUDSpan(Span)
