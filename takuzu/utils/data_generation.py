import argparse
import datetime
import importlib
import json
import logging
import os
import random
import sys
from typing import Any, Dict, List, Optional

import jsonlines
import yaml
from tqdm import tqdm

from takuzu.src.base_instruction_generator import BaseInstructionGenerator

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 20


def load_class_from_string(class_path: str):
    """从字符串路径动态加载类, e.g. 'takuzu.bootcamps.takuzu.instruction_generator.TakuzuInstructionGenerator'"""
    try:
        module_path, class_name = class_path.rsplit('.', 1)
        module = importlib.import_module(module_path)
        return getattr(module, class_name)
    except (ValueError, ImportError, AttributeError) as e:
        raise ImportError(f"无法加载类 {class_path}: {str(e)}") from e


def load_instruction_generators_from_config(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    从配置加载指令生成器实例

    Args:
        config: parsed instruction config

    Returns:
        List[Dict]: 每项包含 generator 实例、ratio 与 name
    """
    global_config = config.get('global_config', {})
    class_name = global_config.get('class_name')

    if not class_name:
        raise ValueError("配置文件中必须指定 global_config.class_name")

    generator_class = load_class_from_string(class_name)

    if not issubclass(generator_class, BaseInstructionGenerator):
        raise TypeError(f"类 {class_name} 必须继承自 BaseInstructionGenerator")

    instruction_generators = []
    generators_config = config.get('instruction_generators') or {}
    for generator_name, generator_config in generators_config.items():
        generator_config = generator_config or {}
        instruction_generators.append({
            'generator': generator_class(**generator_config.get('config', {})),
            'ratio': generator_config.get('generation_ratio', 1.0),
            'name': generator_name,
        })

    if not instruction_generators:
        raise ValueError("配置文件中没有找到 instruction_generators")
    return instruction_generators


def split_by_ratio(num_samples: int, instruction_generators: List[Dict[str, Any]]) -> List[int]:
    """Share num_samples between generators by ratio, remainder goes to the first one"""
    total_ratio = sum(generator['ratio'] for generator in instruction_generators)
    counts = [int(num_samples * generator['ratio'] / total_ratio) for generator in instruction_generators]
    counts[0] += num_samples - sum(counts)
    return counts


def generate_data_with_config(
    instruction_config_path: str,
    output_dir: str,
    split_samples: Optional[Dict[str, int]] = None,
    shuffle: Optional[bool] = None,
    global_config_overrides: Optional[Dict] = None,
    ) -> List[str]:
    """
    通过配置文件生成数据

    Args:
        instruction_config_path: 指令生成器配置文件路径
        output_dir: 输出文件目录
        split_samples: 如 {'train': 100, 'test': 10}; defaults to global_config.default_split_samples
        shuffle: shuffle each split file; global_config.shuffle takes precedence
        global_config_overrides: 全局配置覆盖参数

    Returns:
        List[str]: paths of the written JSONL files
    """
    with open(instruction_config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}

    global_config = config.setdefault('global_config', {})
    if global_config_overrides:
        global_config.update(global_config_overrides)

    if split_samples is None:
        split_samples = global_config.get('default_split_samples', {'test': 1})
    if not isinstance(split_samples, dict):
        raise ValueError("split_samples参数必须是字典格式，如 {'train': 100, 'test': 50}")
    shuffle = global_config.get('shuffle', shuffle)

    instruction_generators = load_instruction_generators_from_config(config)

    splits = [split for split, num in split_samples.items() if num > 0]
    total_samples = sum(split_samples[split] for split in splits)
    config_name = os.path.basename(instruction_config_path).replace('_instruction_config.yaml', '').replace('.yaml', '')
    timestamp = datetime.datetime.now().strftime("%Y%m%d%H%M%S")
    os.makedirs(output_dir, exist_ok=True)

    created_files = []
    global_index = 0
    try:
        with tqdm(total=total_samples, desc=f"生成 {config_name} 数据") as pbar:
            for current_split in splits:
                current_output_path = os.path.join(output_dir, f"{config_name}_{timestamp}_{current_split}.jsonl")
                created_files.append(current_output_path)
                counts = split_by_ratio(split_samples[current_split], instruction_generators)

                records = []
                for generator_info, samples in zip(instruction_generators, counts):
                    generator = generator_info['generator']
                    for _ in range(samples):
                        identity, prompt = generator.generate_case(MAX_ATTEMPTS)
                        records.append({
                            "data_source": generator.data_source,
                            "prompt": [
                                {"content": prompt, "role": "user"}
                            ],
                            "reward_model": {
                                "ground_truth": identity,
                                "style": "rule"
                            },
                            "extra_info": {
                                "index": global_index,
                                "split": current_split,
                                "generator_name": generator_info['name'],
                            },
                        })
                        global_index += 1
                        pbar.update(1)
                        pbar.set_postfix({'split': current_split, 'generator': generator_info['name']})

                if shuffle:
                    random.shuffle(records)
                with jsonlines.open(current_output_path, mode='w') as writer:
                    writer.write_all(records)
                logger.info(f"Wrote {len(records)} {current_split} records to {current_output_path}")
    except Exception:
        # 生成失败时清理已创建的文件
        for file_path in created_files:
            if os.path.exists(file_path):
                os.remove(file_path)
        raise

    return created_files


def parse_split_samples(split_samples_str: str) -> Dict[str, int]:
    """
    将形如 'train:10000,test:100' 的字符串解析为字典 {'train': 10000, 'test': 100}
    """
    result = {}
    if not split_samples_str:
        return result
    for item in split_samples_str.split(','):
        if ':' in item:
            k, v = item.split(':', 1)
            result[k.strip()] = int(v.strip())
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(description="通过配置文件生成 Takuzu 数据集")
    parser.add_argument('--instruction-config', type=str, required=True, help='指令生成器配置文件路径')
    parser.add_argument('--output-dir', type=str, required=True, help='输出文件目录')
    parser.add_argument('--split-samples', type=str, default=None, help="数据集划分和样本数，如 'train:10000,test:100'")
    parser.add_argument('--shuffle', action='store_true', help='是否对生成的数据进行shuffle')
    parser.add_argument('--global-config-overrides', type=str, default=None, help='全局配置覆盖参数 (JSON)')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    generate_data_with_config(
        instruction_config_path=args.instruction_config,
        output_dir=args.output_dir,
        split_samples=parse_split_samples(args.split_samples) if args.split_samples else None,
        shuffle=args.shuffle,
        global_config_overrides=json.loads(args.global_config_overrides) if args.global_config_overrides else None,
    )


if __name__ == "__main__":
    main()
