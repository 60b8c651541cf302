"""
命令行接口
提供项目的统一入口
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from lpmatching.datasets.loader import load_instance
from lpmatching.matching import (
    CvxpySolver,
    MatchingError,
    SolverConfig,
    available_solvers,
    load_solver_config,
    maximum_weight_matching,
    maximum_weight_maximal_matching
)
from lpmatching.utils.graph_utils import summarize_matching

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """设置日志"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _build_solver(args, instance) -> CvxpySolver:
    """命令行参数 > 配置文件 > 实例文件中的solver字段 > 默认值"""
    if args.config:
        config = load_solver_config(args.config)
    elif instance.solver is not None:
        config = instance.solver
    else:
        config = SolverConfig()

    if args.solver:
        return CvxpySolver(config, solver=args.solver)
    return CvxpySolver(config)


def cmd_match(args) -> int:
    """求解匹配实例"""
    try:
        instance = load_instance(args.instance)
        solver = _build_solver(args, instance)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"实例加载失败: {e}")
        return 1

    graph = instance.to_graph()
    weights = instance.weight_matrix()
    maximal = args.maximal or instance.maximal
    cutoff = args.cutoff if args.cutoff is not None else instance.cutoff

    logger.info(f"实例 {instance.name}: {graph.n_vertices} 个顶点, {graph.n_edges} 条边, 求解器 {solver.config.solver}")

    try:
        if maximal:
            result = maximum_weight_maximal_matching(graph, weights, cutoff=cutoff, solver=solver)
        else:
            if cutoff is not None:
                logger.warning("cutoff只用于最大权极大匹配，已忽略")
            result = maximum_weight_matching(graph, weights, solver=solver)
    except MatchingError as e:
        logger.error(f"求解失败: {e}")
        return 1

    summary = summarize_matching(graph, weights, result)
    summary['instance'] = instance.name
    summary['mode'] = 'maximal' if maximal else 'general'

    print(f"\n求解成功!")
    print(f"Objective = {result.weight:.6g}")
    print(f"匹配边数: {result.cardinality}")
    for i, j in result.pairs():
        print(f"  {i} - {j}  (w = {weights[i, j]:.6g})")
    if summary['unmatched']:
        print(f"未匹配顶点: {summary['unmatched']}")

    if args.save_results:
        output = Path(args.save_results)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2, ensure_ascii=False)
        print(f"\n结果已保存到: {output}")

    return 0


def cmd_solvers(args) -> int:
    """列出可用求解器"""
    solvers = available_solvers(mixed_integer=args.mip)
    kind = "支持整数变量的" if args.mip else ""
    print(f"已安装的{kind}求解器:")
    for name in solvers:
        print(f"  {name}")
    return 0


def main(argv=None) -> int:
    """主函数"""
    parser = argparse.ArgumentParser(
        description='基于LP/MIP的图最大权匹配',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='输出详细日志'
    )

    subparsers = parser.add_subparsers(
        title='子命令',
        dest='command',
        help='可用的子命令'
    )

    # match子命令
    parser_match = subparsers.add_parser(
        'match',
        help='求解匹配实例'
    )
    parser_match.add_argument(
        'instance',
        help='实例文件路径 (.yaml/.yml/.csv)'
    )
    parser_match.add_argument(
        '--maximal',
        action='store_true',
        help='求解二分图最大权极大匹配'
    )
    parser_match.add_argument(
        '--cutoff',
        type=float,
        help='权重阈值，低于该值的边不参与极大匹配'
    )
    parser_match.add_argument(
        '--solver',
        help='CVXPY求解器名称 (默认: SCIPY)'
    )
    parser_match.add_argument(
        '--config',
        help='求解器配置YAML文件路径'
    )
    parser_match.add_argument(
        '--save-results',
        help='保存结果的JSON文件路径 (例如: matching.json)'
    )
    parser_match.set_defaults(func=cmd_match)

    # solvers子命令
    parser_solvers = subparsers.add_parser(
        'solvers',
        help='列出已安装的CVXPY求解器'
    )
    parser_solvers.add_argument(
        '--mip',
        action='store_true',
        help='只列出支持整数变量的求解器'
    )
    parser_solvers.set_defaults(func=cmd_solvers)

    # 解析参数
    args = parser.parse_args(argv)

    # 设置日志
    setup_logging(args.verbose)

    # 执行命令
    if hasattr(args, 'func'):
        return args.func(args)

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
