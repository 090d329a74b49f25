# geometry/world.py
from typing import Iterable, Iterator, List, Optional
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

class Scene(Hittable):
    """
    An ordered list of Hittable objects. hit() returns the closest hit in
    range; the result does not depend on insertion order.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
