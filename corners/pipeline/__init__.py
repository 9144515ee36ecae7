"""
Corners Pipeline Module
=======================

Module lifecycle orchestration: generation, presentation and press handling
against an external host.

Usage:
    from corners.pipeline import CornersModule, CornersConfig, RecordingHost

    module = CornersModule(RecordingHost(), CornersConfig(rule_seed=0, serial_last_digit=7))
    puzzle = module.start()
    print(puzzle.describe())
"""

from corners.pipeline.corners_pipeline import (
    CornersConfig,
    CornersModule,
    ModuleHost,
    RecordingHost,
    Scheduler,
    generate_puzzle,
    timer_scheduler,
)

__all__ = [
    'CornersConfig',
    'CornersModule',
    'ModuleHost',
    'RecordingHost',
    'Scheduler',
    'generate_puzzle',
    'timer_scheduler',
]
