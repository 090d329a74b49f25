import argparse
import logging
import sys
from random import Random

from pathtracer.config import LOG_LEVEL, RENDER_SETTINGS, RenderConfig
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.image_io import save_image, write_ppm
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import (default_camera, random_scene,
                               three_spheres_camera, three_spheres_scene)

logger = logging.getLogger("pathtracer")


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="pathtracer", description="Render a sphere scene with a path tracer.")
    p.add_argument('--width', type=int, default=RENDER_SETTINGS['width'])
    p.add_argument('--height', type=int, default=RENDER_SETTINGS['height'])
    p.add_argument('--samples', type=int, default=RENDER_SETTINGS['samples_per_pixel'])
    p.add_argument('--workers', type=int, default=RENDER_SETTINGS['worker_count'])
    p.add_argument('--seed', type=int, default=RENDER_SETTINGS['seed'])
    p.add_argument('--scene', choices=['random', 'three'], default='random')
    p.add_argument('--executor', choices=['process', 'thread'], default='process')
    p.add_argument('--output', default='-', help="'-' writes P3 text to stdout")
    p.add_argument('--log-level', default=LOG_LEVEL)
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    config = RenderConfig.from_dict({
        'width': args.width,
        'height': args.height,
        'samples_per_pixel': args.samples,
        'max_depth': RENDER_SETTINGS['max_depth'],
        'worker_count': args.workers,
        'seed': args.seed,
    })

    if args.scene == 'random':
        world = random_scene(Random(args.seed))
        camera = default_camera(config.aspect_ratio)
    else:
        world = three_spheres_scene()
        camera = three_spheres_camera(config.aspect_ratio)
    logger.info("Scene %r contains %d objects", args.scene, len(world))

    image = Renderer(config, executor=args.executor).render(world, camera)

    if args.output == '-':
        write_ppm(image, sys.stdout)
    else:
        save_image(image, args.output)
        logger.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
