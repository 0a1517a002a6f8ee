"""
Object localisation from image pairs using binary feature matching.
High-level component for finding an object from one image inside another.
"""

import numpy as np
import cv2


class ObjectLocaliser:
    """
    Localises the contents of one image inside a second image.

    Uses BRISK (or ORB) binary features, Hamming-distance kNN matching with a
    ratio test, and RANSAC homography estimation to reject outliers. The
    result is an annotated side-by-side image of the matched keypoints.
    """

    def __init__(self,
                 feature_method="BRISK",
                 norm_type="Hamming",
                 ratio=0.75,
                 max_matches=500,
                 min_matches=4,
                 ransac_threshold=5.0,
                 brisk_threshold=30,
                 brisk_octaves=3,
                 nfeatures=2000):
        """
        Initialize object localiser.

        Args:
            feature_method: Feature detector method ('BRISK' or 'ORB')
            norm_type: Distance norm for matching ('Hamming' for binary descriptors)
            ratio: Lowe ratio test threshold
            max_matches: Maximum number of matches to keep
            min_matches: Minimum number of matches needed to estimate a homography
            ransac_threshold: RANSAC reprojection threshold (pixels)
            brisk_threshold: BRISK AGAST detection threshold
            brisk_octaves: BRISK detection octaves
            nfeatures: Maximum number of features to extract (ORB only)
        """
        self.feature_method = feature_method
        self.norm_type = norm_type
        self.ratio = ratio
        self.max_matches = max_matches
        self.min_matches = min_matches
        self.ransac_threshold = ransac_threshold
        self.brisk_threshold = brisk_threshold
        self.brisk_octaves = brisk_octaves
        self.nfeatures = nfeatures

        # Create feature extractor and matcher once
        self.extractor = self._create_feature_extractor()
        self.matcher = self._create_matcher()

    # ========================================
    # Feature Extraction
    # ========================================

    def _create_feature_extractor(self):
        method = self.feature_method.upper()

        if method == "BRISK":
            return cv2.BRISK_create(thresh=self.brisk_threshold,
                                    octaves=self.brisk_octaves)

        if method == "ORB":
            return cv2.ORB_create(nfeatures=self.nfeatures)

        raise ValueError(f"Unknown feature extraction method: {method}")

    def _detect_and_compute(self, image):
        """
        Detect keypoints and compute descriptors for an image.

        Args:
            image: Input image (BGR or grayscale)

        Returns:
            tuple: (keypoints, descriptors)
        """
        if image.ndim == 3:
            image = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)

        keypoints, descriptors = self.extractor.detectAndCompute(image, None)
        return keypoints, descriptors

    # ========================================
    # Descriptor Matching
    # ========================================

    def _create_matcher(self):
        norm_type = self.norm_type.upper()

        if norm_type == "HAMMING":
            norm = cv2.NORM_HAMMING
        elif norm_type == "HAMMING2":
            norm = cv2.NORM_HAMMING2
        else:
            raise ValueError(f"Unknown norm type: {norm_type}")

        # Ratio test needs the two nearest neighbours, so no cross check
        return cv2.BFMatcher(norm, crossCheck=False)

    def _match_descriptors(self, desc1, desc2):
        """
        Match descriptors between two images.

        Args:
            desc1: Descriptors from first image
            desc2: Descriptors from second image

        Returns:
            list: Matches passing the ratio test, sorted by distance,
                limited to max_matches
        """
        knn = self.matcher.knnMatch(desc1, desc2, k=2)

        good = []
        for pair in knn:
            if len(pair) < 2:
                continue
            m, n = pair
            if m.distance < self.ratio * n.distance:
                good.append(m)

        good = sorted(good, key=lambda m: m.distance)

        if self.max_matches is not None:
            good = good[:self.max_matches]

        return good

    # ========================================
    # Outlier Rejection
    # ========================================

    def _find_homography(self, kp1, kp2, matches):
        """
        Estimate the homography mapping image 1 onto image 2.

        Returns:
            tuple: (H, inlier_mask) or (None, None) if it cannot be estimated
        """
        if len(matches) < self.min_matches:
            return None, None

        pts1 = np.float32([kp1[m.queryIdx].pt for m in matches]).reshape(-1, 1, 2)
        pts2 = np.float32([kp2[m.trainIdx].pt for m in matches]).reshape(-1, 1, 2)

        H, mask = cv2.findHomography(pts1, pts2, cv2.RANSAC, self.ransac_threshold)

        if H is None:
            return None, None

        return H, mask.ravel().astype(bool)

    @staticmethod
    def _draw_outline(output, H, image_1_shape, x_offset):
        h, w = image_1_shape[:2]
        corners = np.float32([[0, 0], [0, h - 1], [w - 1, h - 1], [w - 1, 0]]).reshape(-1, 1, 2)
        projected = cv2.perspectiveTransform(corners, H)
        projected[:, :, 0] += x_offset

        cv2.polylines(output, [np.int32(projected)], True, (0, 255, 0), 3, cv2.LINE_AA)
        return output

    # ========================================
    # Public API
    # ========================================

    def localise_with_debug(self, img1, img2):
        """
        Localise img1 in img2 and return intermediate results.

        Args:
            img1: Object image (BGR)
            img2: Scene image (BGR)

        Returns:
            dict: {
                'output': Annotated side-by-side image,
                'kp1': Keypoints from img1,
                'kp2': Keypoints from img2,
                'matches': Matches drawn on the output,
                'num_matches': Number of matches passing the ratio test,
                'inliers': Number of RANSAC inliers (0 if no homography),
                'H': Homography from img1 to img2, or None
            }

        Raises:
            RuntimeError: If descriptors cannot be computed for one of the images
        """
        # 1. Extract features
        kp1, desc1 = self._detect_and_compute(img1)
        kp2, desc2 = self._detect_and_compute(img2)

        if desc1 is None or desc2 is None:
            raise RuntimeError("Could not compute descriptors for one of the images.")

        # 2. Match descriptors
        matches = self._match_descriptors(desc1, desc2)

        # 3. Reject outliers
        H, inlier_mask = self._find_homography(kp1, kp2, matches)

        if H is None:
            print(f"[WARN] Homography not estimated ({len(matches)} matches, "
                  f"minimum {self.min_matches} required)")
            drawn = matches
            num_inliers = 0
        else:
            drawn = [m for m, keep in zip(matches, inlier_mask) if keep]
            num_inliers = len(drawn)

        # 4. Draw correspondences
        output = cv2.drawMatches(
            img1, kp1, img2, kp2, drawn, None,
            flags=cv2.DrawMatchesFlags_NOT_DRAW_SINGLE_POINTS
        )

        if H is not None:
            self._draw_outline(output, H, img1.shape, x_offset=img1.shape[1])

        return {
            'output': output,
            'kp1': kp1,
            'kp2': kp2,
            'matches': drawn,
            'num_matches': len(matches),
            'inliers': num_inliers,
            'H': H
        }

    def localise(self, img1, img2):
        """
        Localise img1 in img2.

        Returns:
            np.ndarray: Annotated side-by-side image of matched keypoints
        """
        return self.localise_with_debug(img1, img2)['output']

    def brisk(self, img1, img2):
        """
        Match BRISK keypoints between img1 and img2 and draw the result.

        Returns:
            np.ndarray: Annotated side-by-side image of matched keypoints
        """
        if self.feature_method.upper() != "BRISK":
            raise RuntimeError(f"Localiser configured for {self.feature_method}, not BRISK")
        return self.localise(img1, img2)
