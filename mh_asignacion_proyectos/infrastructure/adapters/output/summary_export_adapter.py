import json
import pandas as pd
from typing import Any, Dict, List, Optional, Union
import logging

from mh_asignacion_proyectos.application.ports.output.summary_export_port import SummaryExportPort
from mh_asignacion_proyectos.domain.models.optimization_summary import OptimizationSummary
from mh_asignacion_proyectos.domain.value_objects.export_format import ExportFormat


logger = logging.getLogger(__name__)


class SummaryExportAdapter(SummaryExportPort):
    """Adaptador de salida para exportar resúmenes de optimización.
    
    Implementa el puerto de salida SummaryExportPort para texto (consola),
    CSV (vía pandas) y JSON.
    """
    
    def __init__(self):
        self.supported_formats = [f.to_string() for f in ExportFormat.get_all_formats()]
    
    def get_supported_formats(self) -> List[str]:
        """Obtiene la lista de formatos de exportación soportados."""
        return self.supported_formats
    
    def export_summary(self,
                       summary: OptimizationSummary,
                       export_format: Union[ExportFormat, str],
                       output_path: Optional[str] = None) -> str:
        """Exporta un resumen de optimización al formato indicado."""
        if isinstance(export_format, ExportFormat):
            format_type = export_format.to_string()
        else:
            format_type = str(export_format).lower()
        
        if format_type not in self.supported_formats:
            raise ValueError(f"Formato no soportado: {export_format}. "
                             f"Opciones: {', '.join(self.supported_formats)}")
        
        if format_type == "json":
            content = json.dumps(summary.to_dict(), indent=2, ensure_ascii=False)
        elif format_type == "csv":
            content = self._to_dataframe(summary).to_csv(index=False)
        else:
            content = self._export_to_text(summary)
        
        if output_path:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
            logger.info(f"Resumen exportado a {format_type.upper()}: {output_path}")
            return output_path
        
        return content
    
    def _to_dataframe(self, summary: OptimizationSummary) -> pd.DataFrame:
        """Una fila por empleado, por proyecto y por requisito de habilidad."""
        rows: List[Dict[str, Any]] = []
        
        for row in summary.employee_utilization:
            rows.append({
                "section": "employee",
                "id": row.employee_id,
                "name": row.employee,
                "hours": row.hours,
                "max_hours": row.max_hours,
                "utilization_pct": round(row.utilization, 1),
                "overtime": row.overtime
            })
        
        for row in summary.project_coverage:
            rows.append({
                "section": "project",
                "id": row.project_id,
                "name": row.project,
                "hours": row.total_hours,
                "assigned_employees": row.assigned_employees
            })
        
        for match in summary.skill_matches:
            rows.append({
                "section": "skill",
                "id": match.project_id,
                "name": match.project,
                "skill": match.skill,
                "matched": match.matched,
                "matched_employees": "; ".join(f"{e.name} ({e.level})" for e in match.employees)
            })
        
        columns = ["section", "id", "name", "hours", "max_hours", "utilization_pct", "overtime",
                   "assigned_employees", "skill", "matched", "matched_employees"]
        return pd.DataFrame(rows, columns=columns)
    
    def _export_to_text(self, summary: OptimizationSummary) -> str:
        """Exporta el resumen a texto (para consola)."""
        lines = ["Resumen de Optimización:", "-" * 40]
        lines.append(f"Fitness: {summary.fitness:.2f}")
        lines.append(f"Asignaciones: {summary.total_assignments}")
        lines.append(f"Utilización global: {summary.overall_utilization:.1f}%")
        lines.append(f"Horas extra totales: {summary.total_overtime:.1f}")
        lines.append(f"Cobertura de habilidades: {summary.skill_coverage:.1f}%")
        
        lines.append("\nUtilización por empleado:")
        lines.append("-" * 40)
        if not summary.employee_utilization:
            lines.append("  No hay asignaciones")
        for row in summary.employee_utilization:
            overtime = f", {row.overtime:.1f} h extra" if row.overtime > 0 else ""
            lines.append(f"  {row.employee}: {row.hours:.1f}/{row.max_hours:.1f} h "
                         f"({row.utilization_label}){overtime}")
        
        lines.append("\nCobertura por proyecto:")
        lines.append("-" * 40)
        for row in summary.project_coverage:
            people = ", ".join(f"{e.name} {e.hours:.1f} h" for e in row.employees)
            lines.append(f"  {row.project}: {row.assigned_employees} asignaciones, "
                         f"{row.total_hours:.1f} h [{people}]")
        
        missing = [m for m in summary.skill_matches if not m.matched]
        if missing:
            lines.append("\nHabilidades sin cubrir:")
            lines.append("-" * 40)
            for match in missing:
                lines.append(f"  {match.project}: {match.skill}")
        
        if summary.unassigned_projects:
            lines.append("\n" + "-" * 40)
            lines.append(f"Proyectos sin asignar: {', '.join(summary.unassigned_projects)}")
        
        return "\n".join(lines)
