"""CLI commands for sha1py."""

from sha1py.cli.commands.sum import sum_cmd
from sha1py.cli.commands.check import check_cmd
from sha1py.cli.commands.bench import bench_cmd
from sha1py.cli.commands.config import config_cmd

__all__ = ['sum_cmd', 'check_cmd', 'bench_cmd', 'config_cmd']
