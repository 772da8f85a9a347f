from mobile_price.features.mobiles.services import MobileService
from mobile_price.features.viewer import geometry
from mobile_price.features.viewer.schemas import OverlayOut, PhoneFrameOut, PhoneModelOut


class ViewerService:
    """
    Visualisations d'un mobile du catalogue (vue 360°, essayage AR).
    Résout le mobile (404 si absent) puis délègue les calculs à geometry.
    """

    def __init__(self, mobile_svc: MobileService):
        self.mobile_svc = mobile_svc

    def model(self, brand: str, slug: str) -> PhoneModelOut:
        mobile = self.mobile_svc.get_by_slug(brand, slug)
        dims = geometry.device_dimensions(mobile.brand)
        return PhoneModelOut(
            brand=mobile.brand,
            dimensions=dims,
            vertices=geometry.phone_vertices(dims),
            textures=list(mobile.carousel_images or []) or [mobile.image_url],
            materials=geometry.materials(mobile.brand),
            animations=geometry.animations(),
        )

    def frame(
        self,
        brand: str,
        slug: str,
        *,
        angle: float,
        zoom: float,
        canvas_width: int,
        canvas_height: int,
    ) -> PhoneFrameOut:
        mobile = self.mobile_svc.get_by_slug(brand, slug)
        return geometry.phone_frame(
            brand=mobile.brand,
            angle=angle,
            zoom=zoom,
            canvas_width=canvas_width,
            canvas_height=canvas_height,
        )

    def overlay(self, brand: str, slug: str, *, x: float, y: float, scale: float, hand: str) -> OverlayOut:
        mobile = self.mobile_svc.get_by_slug(brand, slug)
        return geometry.ar_overlay(brand=mobile.brand, x=x, y=y, scale=scale, hand=hand)
