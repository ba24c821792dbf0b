# utils/seller_performance/export.py
"""
Formatted Excel Export for the Sales Dashboard

Creates an Excel report with:
- Cover sheet with KPI summary
- Monthly target vs actual with attainment color scale
- Quarterly rollups
- Client portfolio (ranked by lifetime value)

Uses openpyxl for formatting capabilities.
"""

import logging
from datetime import datetime
from io import BytesIO
from typing import Dict, List, Tuple

import pandas as pd
from openpyxl import Workbook
from openpyxl.formatting.rule import ColorScaleRule
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..common import format_brl, format_percent
from .constants import EXCEL_STYLES

logger = logging.getLogger(__name__)

# (column, header, width, kind) where kind is 'text', 'currency' or 'percent'
ColumnSpec = Tuple[str, str, int, str]

MONTHLY_COLUMNS: List[ColumnSpec] = [
    ('month', 'Month', 10, 'text'),
    ('quarter', 'Quarter', 10, 'text'),
    ('target', 'Target', 16, 'currency'),
    ('actual', 'Actual', 16, 'currency'),
    ('attainment', 'Attainment', 12, 'percent'),
    ('gap', 'Gap', 16, 'currency'),
    ('cumulative_actual', 'Cumulative Actual', 18, 'currency'),
]

QUARTERLY_COLUMNS: List[ColumnSpec] = [
    ('quarter', 'Quarter', 10, 'text'),
    ('target', 'Target', 16, 'currency'),
    ('actual', 'Actual', 16, 'currency'),
    ('attainment', 'Attainment', 12, 'percent'),
]

PORTFOLIO_COLUMNS: List[ColumnSpec] = [
    ('name', 'Client', 36, 'text'),
    ('sector', 'Sector', 20, 'text'),
    ('health_label', 'Health', 12, 'text'),
    ('total_history', 'History 2021-2025', 18, 'currency'),
    ('total_projected', 'Projected 2026-2030', 18, 'currency'),
    ('estimated_ltv', 'Estimated LTV', 18, 'currency'),
    ('peak_revenue', 'Peak Year', 16, 'currency'),
    ('growth_factor', 'Growth Factor', 14, 'percent'),
]


class PerformanceExport:
    """
    Excel report generator for the sales dashboard.

    Usage:
        exporter = PerformanceExport()
        excel_bytes = exporter.create_report(
            overview=overview,
            monthly_df=monthly_df,
            quarterly_df=quarterly_df,
            portfolio_df=portfolio_df,
            month='Jan'
        )

        st.download_button(
            label="Download Report",
            data=excel_bytes,
            file_name="sales_performance.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
    """

    def __init__(self):
        """Initialize with default styles."""
        self.wb = None
        self._init_styles()

    def _init_styles(self):
        """Initialize reusable styles."""
        self.header_fill = PatternFill(
            start_color=EXCEL_STYLES['header_fill_color'],
            end_color=EXCEL_STYLES['header_fill_color'],
            fill_type='solid'
        )
        self.header_font = Font(
            bold=True,
            color=EXCEL_STYLES['header_font_color'],
            size=11
        )
        self.title_font = Font(bold=True, size=16)
        self.subtitle_font = Font(bold=True, size=12)

        thin_border = Side(style='thin', color='000000')
        self.cell_border = Border(
            left=thin_border,
            right=thin_border,
            top=thin_border,
            bottom=thin_border
        )

        self.center_align = Alignment(horizontal='center', vertical='center')
        self.right_align = Alignment(horizontal='right', vertical='center')

        self.currency_format = EXCEL_STYLES['currency_format']
        self.percent_format = EXCEL_STYLES['percent_format']

    # =========================================================================
    # MAIN EXPORT METHOD
    # =========================================================================

    def create_report(
        self,
        overview: Dict,
        monthly_df: pd.DataFrame,
        quarterly_df: pd.DataFrame,
        month: str,
        portfolio_df: pd.DataFrame = None,
        company_name: str = ""
    ) -> BytesIO:
        """
        Create formatted Excel report with multiple sheets.

        Args:
            overview: SellerMetrics.calculate_overview_metrics() output
            monthly_df: Monthly summary
            quarterly_df: Quarterly summary
            month: Selected month shown on the cover sheet
            portfolio_df: Optional ranked client portfolio
            company_name: Shown in the report title

        Returns:
            BytesIO containing Excel file
        """
        self.wb = Workbook()

        self._create_cover_sheet(overview, month, company_name)
        self._create_table_sheet("Monthly", monthly_df, MONTHLY_COLUMNS, color_scale_column='attainment')
        self._create_table_sheet("Quarterly", quarterly_df, QUARTERLY_COLUMNS, color_scale_column='attainment')

        if portfolio_df is not None and not portfolio_df.empty:
            self._create_table_sheet("Clients", portfolio_df, PORTFOLIO_COLUMNS)

        output = BytesIO()
        self.wb.save(output)
        output.seek(0)

        logger.info("Excel report created successfully")
        return output

    # =========================================================================
    # COVER SHEET
    # =========================================================================

    def _create_cover_sheet(self, overview: Dict, month: str, company_name: str):
        """Create cover page with KPI summary."""
        ws = self.wb.active
        ws.title = "Summary"

        row = 1
        title = "Sales Performance Report"
        if company_name:
            title = f"{title} - {company_name}"
        ws.cell(row=row, column=1, value=title).font = self.title_font
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=4)
        row += 2

        ws.cell(row=row, column=1, value="Selected Month:")
        ws.cell(row=row, column=2, value=month)
        row += 1

        ws.cell(row=row, column=1, value="Generated:")
        ws.cell(row=row, column=2, value=datetime.now().strftime('%Y-%m-%d %H:%M'))
        row += 2

        ws.cell(row=row, column=1, value="Key Performance Indicators").font = self.subtitle_font
        row += 1

        performer = overview['top_performer']
        kpi_rows = [
            ("Accumulated Revenue", format_brl(overview['annual_total'])),
            ("Annual Goal", format_brl(overview['annual_goal'])),
            ("Goal Reached", format_percent(overview['annual_goal_percent'])),
            (f"Quarter ({overview['current_quarter']}) Attainment", format_percent(overview['quarter_attainment'])),
            (f"Month ({month}) Actual", format_brl(overview['month_actual'])),
            (f"Month ({month}) Target", format_brl(overview['month_target'])),
            (f"Month ({month}) Attainment", format_percent(overview['month_attainment'])),
            ("Top Seller (Month)", f"{performer.label} ({format_brl(performer.value)})"),
        ]

        for label, value in kpi_rows:
            ws.cell(row=row, column=1, value=label)
            ws.cell(row=row, column=2, value=value).alignment = self.right_align
            row += 1

        ws.column_dimensions['A'].width = 30
        ws.column_dimensions['B'].width = 26

    # =========================================================================
    # TABLE SHEETS
    # =========================================================================

    def _create_table_sheet(
        self,
        title: str,
        df: pd.DataFrame,
        columns: List[ColumnSpec],
        color_scale_column: str = None
    ):
        """Write a DataFrame as a formatted table; percent columns hold 0-100 values."""
        if df.empty:
            return

        ws = self.wb.create_sheet(title)
        columns = [spec for spec in columns if spec[0] in df.columns]

        for col_idx, (_, header, width, _) in enumerate(columns, 1):
            cell = ws.cell(row=1, column=col_idx, value=header)
            cell.fill = self.header_fill
            cell.font = self.header_font
            cell.alignment = self.center_align
            cell.border = self.cell_border
            ws.column_dimensions[get_column_letter(col_idx)].width = width

        for row_idx, record in enumerate(df.to_dict('records'), 2):
            for col_idx, (col_name, _, _, kind) in enumerate(columns, 1):
                value = record[col_name]
                if kind == 'percent':
                    value = float(value) / 100
                elif kind == 'currency':
                    value = float(value)

                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = self.cell_border
                if kind == 'currency':
                    cell.number_format = self.currency_format
                    cell.alignment = self.right_align
                elif kind == 'percent':
                    cell.number_format = self.percent_format
                    cell.alignment = self.right_align

        if color_scale_column:
            for col_idx, (col_name, _, _, _) in enumerate(columns, 1):
                if col_name == color_scale_column:
                    letter = get_column_letter(col_idx)
                    # Red below 80%, yellow at 100%, green from 120%
                    ws.conditional_formatting.add(
                        f'{letter}2:{letter}{len(df) + 1}',
                        ColorScaleRule(
                            start_type='num', start_value=0.8, start_color='F8696B',
                            mid_type='num', mid_value=1.0, mid_color='FFEB84',
                            end_type='num', end_value=1.2, end_color='63BE7B'
                        )
                    )

        ws.freeze_panes = 'A2'
