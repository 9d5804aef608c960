from geometry import Point, as_points, dominates


class NaiveMaximaFinder:
    def find_maxima(self, points: list[Point]) -> list[Point]:
        preprocessed_points = as_points(points)

        maxima = []
        for point in preprocessed_points:
            if not any(dominates(other, point) for other in preprocessed_points):
                maxima.append(point)

        return maxima
