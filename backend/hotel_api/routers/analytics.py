"""
统计分析路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from hotel_api.database import get_db
from hotel_api.models.schemas import OverviewStats, RevenuePoint, BookingAnalytics
from hotel_api.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api/analytics", tags=["统计分析"])


@router.get("/overview", response_model=OverviewStats)
def get_overview(db: Session = Depends(get_db)):
    """运营概览"""
    return OverviewStats(**AnalyticsService(db).get_overview())


@router.get("/revenue", response_model=List[RevenuePoint])
def get_revenue(period: Optional[str] = None, db: Session = Depends(get_db)):
    """
    营收趋势

    period: yearly / monthly / weekly，缺省为近三个月
    """
    report = AnalyticsService(db).get_revenue_report(period)
    return [RevenuePoint(**point) for point in report]


@router.get("/bookings", response_model=BookingAnalytics)
def get_booking_analytics(db: Session = Depends(get_db)):
    """预订渠道与房型分布"""
    return BookingAnalytics(**AnalyticsService(db).get_booking_analytics())
