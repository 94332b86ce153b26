"""Adaptador para visualización de convergencia y comparación de algoritmos."""

import numpy as np
import matplotlib.pyplot as plt
import pandas as pd
import logging
from typing import Dict, Any
from pathlib import Path

from mh_asignacion_proyectos.application.ports.output.optimization_visualization_port import OptimizationVisualizationPort
from mh_asignacion_proyectos.domain.models.optimization_result import GenerationRecord, OptimizationResult

logger = logging.getLogger(__name__)


class OptimizationVisualizationAdapter(OptimizationVisualizationPort):
    """Adaptador que genera gráficos PNG con matplotlib."""
    
    def plot_convergence(self, result: OptimizationResult, output_dir: str = "./assets/plots") -> str:
        """
        Grafica la evolución del fitness registrada en el historial del resultado.
        
        Para el algoritmo genético se dibujan el mejor fitness y el promedio por
        generación; para el recocido simulado, el fitness actual y el mejor junto
        a la temperatura en un segundo eje logarítmico.
        """
        if not result.history:
            logger.info(f"El resultado de {result.algorithm or 'la ejecución'} no tiene historial para graficar")
            return ""
        
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        fig, ax = plt.subplots(figsize=(10, 6))
        
        if isinstance(result.history[0], GenerationRecord):
            x = np.array([r.generation for r in result.history])
            ax.plot(x, [r.best_fitness for r in result.history], label='Mejor fitness', color='purple')
            ax.plot(x, [r.average_fitness for r in result.history], label='Fitness promedio',
                    color='green', alpha=0.7)
            ax.set_xlabel('Generación')
        else:
            x = np.array([r.iteration for r in result.history])
            ax.plot(x, [r.current_fitness for r in result.history], label='Fitness actual',
                    color='blue', alpha=0.7)
            ax.plot(x, [r.best_fitness for r in result.history], label='Mejor fitness', color='purple')
            ax.set_xlabel('Iteración')
            
            temperatures = np.array([r.temperature for r in result.history])
            if np.all(temperatures > 0):
                ax_temp = ax.twinx()
                ax_temp.plot(x, temperatures, label='Temperatura', color='red', linestyle='--', alpha=0.5)
                ax_temp.set_yscale('log')
                ax_temp.set_ylabel('Temperatura')
        
        ax.set_ylabel('Fitness')
        ax.set_title(f'Convergencia - {result.algorithm}')
        ax.legend(loc='lower right')
        fig.tight_layout()
        
        slug = (result.algorithm or "resultado").lower().replace(" ", "_")
        plot_path = f'{output_dir}/convergencia_{slug}.png'
        fig.savefig(plot_path)
        plt.close(fig)
        logger.info(f"Gráfico de convergencia guardado como '{plot_path}'")
        return plot_path
    
    def plot_comparison(self, results: Dict[str, Any], output_dir: str = "./assets/plots") -> Dict[str, str]:
        """
        Crea gráficos de comparación entre algoritmos y exporta las estadísticas a CSV.
        
        Args:
            results: Estadísticas por algoritmo (avg_*/std_* de fitness, tiempo,
                     utilización y cobertura de habilidades)
            output_dir: Directorio donde guardar los archivos generados
            
        Returns:
            Diccionario con rutas de los archivos generados
        """
        algorithms = list(results.keys())
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        generated_files = {}
        
        panels = [
            ("fitness", 'Fitness (mayor es mejor)', 'Fitness', 'purple'),
            ("time", 'Tiempo de Ejecución', 'Tiempo (segundos)', 'blue'),
            ("utilization", 'Utilización de Capacidad', '% Utilización', 'green'),
            ("skill_coverage", 'Cobertura de Habilidades', '% Cobertura', 'red'),
        ]
        
        fig, axes = plt.subplots(2, 2, figsize=(12, 8))
        for ax, (key, title, ylabel, color) in zip(axes.flat, panels):
            averages = [results[algo][f"avg_{key}"] for algo in algorithms]
            deviations = [results[algo][f"std_{key}"] for algo in algorithms]
            ax.bar(algorithms, averages, yerr=deviations, capsize=5, color=color, alpha=0.7)
            ax.set_title(title)
            ax.set_ylabel(ylabel)
            ax.tick_params(axis='x', rotation=45)
        
        fig.tight_layout()
        fig.suptitle('Comparación de Algoritmos', size=16, y=1.02)
        
        comparison_plot_path = f'{output_dir}/comparacion_algoritmos.png'
        fig.savefig(comparison_plot_path, bbox_inches='tight')
        plt.close(fig)
        generated_files['comparison_plot'] = comparison_plot_path
        logger.info(f"Gráfico de comparación guardado como '{comparison_plot_path}'")
        
        results_df = pd.DataFrame({
            'Algoritmo': algorithms,
            'Corridas': [results[algo]["runs"] for algo in algorithms],
            'Mejor_Fitness': [results[algo]["best_fitness"] for algo in algorithms],
            **{
                f'{key.capitalize()}_{stat}': [results[algo][f"{prefix}_{key}"] for algo in algorithms]
                for key, *_ in panels
                for prefix, stat in (("avg", "Promedio"), ("std", "Desviacion"))
            }
        })
        
        csv_path = f'{output_dir}/resultados_comparacion.csv'
        results_df.to_csv(csv_path, index=False)
        generated_files['results_csv'] = csv_path
        logger.info(f"Resultados de comparación exportados a '{csv_path}'")
        
        return generated_files
