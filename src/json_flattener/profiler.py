"""Performance profiler for conversion operations."""

import json
import time
import psutil
import logging
from collections import deque
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for a conversion."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    leaf_count: int
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float
    succeeded: bool


@dataclass
class ProfileSession:
    """Measurements collected while one operation runs."""
    operation_name: str
    input_size: int
    start_time: float
    memory_start_mb: float
    output_size: int = 0
    leaf_count: int = 0
    succeeded: bool = False
    
    def record_output(self, output_size: int, leaf_count: int) -> None:
        """Mark the operation as finished with the given output."""
        self.output_size = output_size
        self.leaf_count = leaf_count
        self.succeeded = True


def _current_memory_mb() -> float:
    return psutil.Process().memory_info().rss / 1024 / 1024


class PerformanceProfiler:
    """
    Records timing and memory usage of conversions.
    
    Each profiled operation gets its own session, so one profiler can be
    shared by conversions running on different threads.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None, history_limit: int = 100):
        """
        Initialize the performance profiler.
        
        Args:
            logger: Optional logger instance
            history_limit: Number of most recent metrics to keep
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: deque = deque(maxlen=history_limit)
    
    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.
        
        Metrics are recorded even when the operation raises.
        
        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        session = ProfileSession(
            operation_name=operation_name,
            input_size=input_size,
            start_time=time.time(),
            memory_start_mb=_current_memory_mb()
        )
        self.logger.debug(f"Started profiling: {operation_name}")
        try:
            yield session
        finally:
            self._finish(session)
    
    def _finish(self, session: ProfileSession) -> PerformanceMetrics:
        end_time = time.time()
        duration = end_time - session.start_time
        throughput = (session.input_size / 1024 / 1024) / duration if duration > 0 else 0
        
        metrics = PerformanceMetrics(
            operation_name=session.operation_name,
            start_time=session.start_time,
            end_time=end_time,
            duration=duration,
            input_size=session.input_size,
            output_size=session.output_size,
            leaf_count=session.leaf_count,
            memory_start_mb=session.memory_start_mb,
            memory_end_mb=_current_memory_mb(),
            throughput_mbps=throughput,
            succeeded=session.succeeded
        )
        self.metrics_history.append(metrics)
        
        self.logger.debug(f"Performance Summary - {metrics.operation_name}: "
                          f"duration={duration * 1000:.2f}ms, leaves={metrics.leaf_count}, "
                          f"output={metrics.output_size}B, memory={metrics.memory_end_mb:.1f}MB, "
                          f"succeeded={metrics.succeeded}")
        return metrics
    
    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded metrics.
        
        Returns:
            Dictionary with performance summary
        """
        history: List[PerformanceMetrics] = list(self.metrics_history)
        if not history:
            return {"total_operations": 0}
        
        return {
            "total_operations": len(history),
            "failed_operations": sum(1 for m in history if not m.succeeded),
            "total_duration": sum(m.duration for m in history),
            "total_input_bytes": sum(m.input_size for m in history),
            "total_output_bytes": sum(m.output_size for m in history),
            "total_leaves": sum(m.leaf_count for m in history),
            "average_throughput_mbps": sum(m.throughput_mbps for m in history) / len(history),
            "max_memory_mb": max(m.memory_end_mb for m in history),
        }
    
    def export_metrics(self, format: str = "json") -> str:
        """
        Export performance metrics in specified format.
        
        Args:
            format: Export format ("json", "csv", "summary")
            
        Returns:
            Formatted metrics string
        """
        if format == "json":
            return json.dumps([
                {
                    "operation": m.operation_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "output_size": m.output_size,
                    "leaf_count": m.leaf_count,
                    "memory_end_mb": m.memory_end_mb,
                    "throughput_mbps": m.throughput_mbps,
                    "succeeded": m.succeeded
                }
                for m in self.metrics_history
            ], indent=2)
        
        elif format == "csv":
            lines = ["operation,duration,input_size,output_size,leaf_count,memory_end_mb,throughput_mbps,succeeded"]
            for m in self.metrics_history:
                lines.append(f"{m.operation_name},{m.duration},{m.input_size},{m.output_size},"
                             f"{m.leaf_count},{m.memory_end_mb},{m.throughput_mbps},{m.succeeded}")
            return "\n".join(lines)
        
        elif format == "summary":
            summary = self.get_performance_summary()
            if summary["total_operations"] == 0:
                return "Performance Summary:\n  Total Operations: 0"
            lines = [
                "Performance Summary:",
                f"  Total Operations: {summary['total_operations']}",
                f"  Failed Operations: {summary['failed_operations']}",
                f"  Total Duration: {summary['total_duration']:.4f}s",
                f"  Total Input: {summary['total_input_bytes']} bytes",
                f"  Total Output: {summary['total_output_bytes']} bytes",
                f"  Total Leaves: {summary['total_leaves']}",
                f"  Max Memory: {summary['max_memory_mb']:.1f} MB"
            ]
            return "\n".join(lines)
        
        else:
            raise ValueError(f"Unsupported export format: {format}")
